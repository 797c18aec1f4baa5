from enum import Enum
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from datetime import datetime
import pytz

from .base import BaseModel


class ActivityKind(str, Enum):
    """学习活动类型"""
    LESSON = "lesson"
    QUIZ = "quiz"


"""
学习活动模型
只追加不修改，记录每一次课程学习或测验完成事件，家长看板按时间倒序展示。
"""

class Activity(BaseModel):
    __tablename__ = "activities"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(20), nullable=False)
    item_id = Column(String(50), nullable=False)
    activity = Column(String(20), nullable=False)  # lesson, quiz
    score = Column(Integer)
    timestamp = Column(DateTime, nullable=False, default=lambda: datetime.now(pytz.utc))
