"""
模型基类
所有表共用自增主键和创建/更新时间（UTC）。SQLite 读回的时间不带时区，比较时统一按 UTC 处理。
"""
import pytz
from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, Integer, DateTime
from datetime import datetime

Base = declarative_base()


def _utc_now():
    return datetime.now(pytz.utc)


class BaseModel(Base):
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=_utc_now)
    updated_at = Column(DateTime, default=_utc_now, onupdate=_utc_now)

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id}>"
