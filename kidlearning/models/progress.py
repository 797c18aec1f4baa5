from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from datetime import datetime
import pytz

from .base import BaseModel

"""
学习进度模型
每个 (用户, 分类, 内容) 只保留一条记录，重复完成时原地更新完成状态、得分和完成时间。
"""

class Progress(BaseModel):
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "category", "item_id", name="uq_progress_user_category_item"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(20), nullable=False)  # alphabets, numbers, shapes
    item_id = Column(String(50), nullable=False)   # "A", "7", "circle", "quiz"
    completed = Column(Boolean, nullable=False, default=False)
    score = Column(Integer)
    completed_at = Column(DateTime, default=lambda: datetime.now(pytz.utc))
