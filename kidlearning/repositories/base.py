from typing import List, Optional, TypeVar, Generic
from sqlalchemy.orm import Session

from kidlearning.utils.database import db_retry

T = TypeVar('T')

class BaseRepository(Generic[T]):
    """基础Repository类，提供通用的查询和创建操作"""

    def __init__(self, db: Session, model_class: T):
        self.db = db
        self.model_class = model_class

    @db_retry
    def get_by_id(self, id: int) -> Optional[T]:
        """根据ID获取记录"""
        return self.db.query(self.model_class).filter(self.model_class.id == id).first()

    def create(self, commit: bool = True, **kwargs) -> T:
        """创建新记录，commit=False 时只 flush，由调用方统一提交"""
        instance = self.model_class(**kwargs)
        self.db.add(instance)
        self._save(commit)
        self.db.refresh(instance)
        return instance

    @db_retry
    def filter_by(self, **filters) -> List[T]:
        """根据条件过滤记录"""
        query = self.db.query(self.model_class)
        for attr, value in filters.items():
            if hasattr(self.model_class, attr):
                query = query.filter(getattr(self.model_class, attr) == value)
        return query.order_by(self.model_class.id).all()

    @db_retry
    def get_first_by(self, **filters) -> Optional[T]:
        """根据条件获取第一条记录"""
        query = self.db.query(self.model_class)
        for attr, value in filters.items():
            if hasattr(self.model_class, attr):
                query = query.filter(getattr(self.model_class, attr) == value)
        return query.order_by(self.model_class.id).first()

    def _save(self, commit: bool):
        if commit:
            self.db.commit()
        else:
            self.db.flush()
