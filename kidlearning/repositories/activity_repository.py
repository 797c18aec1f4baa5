from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from kidlearning.models.activity import Activity
from kidlearning.repositories.base import BaseRepository
from kidlearning.utils.database import db_retry


class ActivityRepository(BaseRepository[Activity]):
    def __init__(self, db: Session):
        super().__init__(db, Activity)

    def append(self, user_id: int, category: str, item_id: str,
               activity: str, score: Optional[int] = None,
               commit: bool = True) -> Activity:
        """追加一条学习活动，时间戳由模型默认值生成"""
        return self.create(
            commit=commit,
            user_id=user_id,
            category=category,
            item_id=item_id,
            activity=activity,
            score=score,
        )

    @db_retry
    def get_recent(self, user_id: int, limit: int = 10) -> List[Activity]:
        """获取用户最近的学习活动，时间相同时后插入的排在前面"""
        return self.db.query(Activity).filter(
            Activity.user_id == user_id
        ).order_by(
            desc(Activity.timestamp),
            desc(Activity.id)
        ).limit(limit).all()
