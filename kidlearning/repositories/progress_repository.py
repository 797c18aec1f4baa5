import logging
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import pytz

from kidlearning.models.progress import Progress
from kidlearning.repositories.base import BaseRepository
from kidlearning.utils.database import db_retry

logger = logging.getLogger(__name__)


class ProgressRepository(BaseRepository[Progress]):
    def __init__(self, db: Session):
        super().__init__(db, Progress)

    @db_retry
    def get_progress(self, user_id: int, category: Optional[str] = None) -> List[Progress]:
        """获取用户的全部进度，可按分类过滤"""
        query = self.db.query(Progress).filter(Progress.user_id == user_id)
        if category:
            query = query.filter(Progress.category == category)
        return query.order_by(Progress.id).all()

    @db_retry
    def get_by_item(self, user_id: int, category: str, item_id: str) -> Optional[Progress]:
        """根据 (用户, 分类, 内容) 获取进度"""
        return self._find(user_id, category, item_id)

    @db_retry
    def upsert(self, user_id: int, category: str, item_id: str,
               completed: bool, score: Optional[int] = None,
               commit: bool = True) -> Progress:
        """
        写入进度：同一 (用户, 分类, 内容) 已有记录时原地更新，否则新建

        并发插入同一键时由唯一约束兜底，插入失败的一方回滚后改为更新。
        commit=False 时只 flush，必须是所在事务中的第一次写入（冲突回滚会丢弃整个事务）。
        """
        record = self._find(user_id, category, item_id)
        if record:
            return self._apply(record, completed, score, commit)

        record = Progress(
            user_id=user_id,
            category=category,
            item_id=item_id,
            completed=completed,
            score=score,
            completed_at=datetime.now(pytz.utc),
        )
        self.db.add(record)
        try:
            self._save(commit)
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"进度记录并发写入冲突，改为更新: 用户{user_id}, {category}/{item_id}")
            existing = self._find(user_id, category, item_id)
            if existing is None:
                raise
            return self._apply(existing, completed, score, commit)

        self.db.refresh(record)
        return record

    def _find(self, user_id: int, category: str, item_id: str) -> Optional[Progress]:
        return self.db.query(Progress).filter(
            Progress.user_id == user_id,
            Progress.category == category,
            Progress.item_id == item_id
        ).first()

    def _apply(self, record: Progress, completed: bool, score: Optional[int],
               commit: bool) -> Progress:
        record.completed = completed
        record.score = score
        record.completed_at = datetime.now(pytz.utc)
        self._save(commit)
        self.db.refresh(record)
        return record
