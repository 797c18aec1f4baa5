from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from .base import BaseModel

"""
用户模型
家长账号和儿童账号共用一张表：家长账号带密码摘要，儿童账号通过 parent_id 指向所属家长。
"""
class User(BaseModel):
    __tablename__ = "users"

    username = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(128))
    is_parent = Column(Boolean, nullable=False, default=False)
    child_name = Column(String(100))
    child_avatar = Column(String(50))
    parent_id = Column(Integer, ForeignKey("users.id"), index=True)
