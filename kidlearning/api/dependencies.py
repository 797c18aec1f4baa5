"""
路由公共依赖
登录为占位实现：客户端在请求头 X-User-Id 中带上登录返回的用户ID，即视为当前用户。
"""

from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from kidlearning.models.user import User
from kidlearning.services.user_service import UserService
from kidlearning.utils.database import get_db
from kidlearning.utils.exceptions import UnauthorizedError


def get_current_user(
    x_user_id: Optional[int] = Header(None, alias="X-User-Id"),
    db: Session = Depends(get_db)
) -> User:
    """获取当前登录用户"""
    if x_user_id is None:
        raise UnauthorizedError("请先登录")
    user = UserService(db).get_user_by_id(x_user_id)
    if not user:
        raise UnauthorizedError("登录用户不存在")
    return user
