#!/usr/bin/env python3
"""
用户服务模块
处理家长/儿童账号的创建、查询、默认账号初始化、占位登录以及数据访问权限判断
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from kidlearning.config.settings import settings
from kidlearning.models.user import User
from kidlearning.repositories.user_repository import UserRepository
from kidlearning.utils.exceptions import (
    ForbiddenError, UnauthorizedError, UserNotFoundError, ValidationError
)
from kidlearning.utils.helpers import capitalize_word, hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """根据ID获取用户信息"""
        return self.user_repo.get_by_id(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """根据用户名获取用户信息"""
        return self.user_repo.get_by_username(username)

    def require_user(self, user_id: int) -> User:
        """获取用户，不存在时抛出异常"""
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, username: str, is_parent: bool = False,
                    password: Optional[str] = None,
                    child_name: Optional[str] = None,
                    child_avatar: Optional[str] = None,
                    parent_id: Optional[int] = None) -> User:
        """
        创建用户

        儿童账号必须指定所属家长，家长账号不能再挂在其他账号下。
        """
        if is_parent and parent_id is not None:
            raise ValidationError("家长账号不能设置所属家长")
        if not is_parent:
            if parent_id is None:
                raise ValidationError("儿童账号必须指定所属家长")
            parent = self.user_repo.get_by_id(parent_id)
            if not parent or not parent.is_parent:
                raise ValidationError(f"所属家长账号无效: {parent_id}")
        if self.user_repo.get_by_username(username):
            raise ValidationError(f"用户名已存在: {username}")

        user = self.user_repo.create(
            username=username,
            password_hash=hash_password(password) if password else None,
            is_parent=is_parent,
            child_name=child_name,
            child_avatar=child_avatar,
            parent_id=parent_id,
        )
        logger.info(f"新用户创建成功: {user.id} - {user.username} (家长: {user.is_parent})")
        return user

    def get_children(self, parent_id: int) -> List[User]:
        """获取家长名下的儿童账号"""
        return self.user_repo.get_children(parent_id)

    def bootstrap_default_users(self) -> List[User]:
        """
        初始化默认账号：一个家长账号和每种头像颜色各一个儿童账号

        已存在的账号会跳过，可以重复执行。
        """
        created = []

        parent = self.user_repo.get_by_username(settings.DEFAULT_PARENT_USERNAME)
        if not parent:
            parent = self.create_user(
                username=settings.DEFAULT_PARENT_USERNAME,
                password=settings.DEFAULT_PARENT_PASSWORD,
                is_parent=True,
            )
            created.append(parent)

        for avatar in settings.DEFAULT_CHILD_AVATARS:
            if self.user_repo.get_by_username(avatar):
                continue
            created.append(self.create_user(
                username=avatar,
                child_name=capitalize_word(avatar),
                child_avatar=avatar,
                parent_id=parent.id,
            ))

        return created

    def login(self, avatar: Optional[str] = None, username: Optional[str] = None,
              password: Optional[str] = None) -> User:
        """
        占位登录
        - 儿童：选择头像即可登录
        - 家长：用户名 + 密码
        """
        if avatar:
            user = self.user_repo.get_by_avatar(avatar)
            if not user:
                raise UnauthorizedError(f"没有使用该头像的儿童账号: {avatar}")
            logger.info(f"儿童账号登录: {user.id} - {user.username}")
            return user

        if not username or not password:
            raise ValidationError("请选择头像，或输入用户名和密码")

        user = self.user_repo.get_by_username(username)
        if not user or not user.is_parent or not verify_password(password, user.password_hash):
            raise UnauthorizedError("用户名或密码错误")
        logger.info(f"家长账号登录: {user.id} - {user.username}")
        return user

    def register_parent(self, username: str, password: str,
                        confirm_password: Optional[str] = None) -> User:
        """家长注册"""
        if confirm_password is not None and confirm_password != password:
            raise ValidationError("两次输入的密码不一致")
        return self.create_user(username=username, password=password, is_parent=True)

    def create_child(self, parent: User, child_name: str, child_avatar: Optional[str] = None,
                     username: Optional[str] = None) -> User:
        """家长为自己添加儿童账号"""
        if not parent.is_parent:
            raise ForbiddenError("只有家长账号可以添加儿童账号")
        return self.create_user(
            username=username or f"{parent.username}-{child_name.strip().lower().replace(' ', '-')}",
            child_name=child_name,
            child_avatar=child_avatar,
            parent_id=parent.id,
        )

    def can_access(self, caller: User, target_user_id: int) -> bool:
        """
        数据访问权限判断
        本人可以访问自己的数据；家长可以访问自己名下儿童的数据
        """
        if caller.id == target_user_id:
            return True
        if not caller.is_parent:
            return False
        target = self.user_repo.get_by_id(target_user_id)
        return target is not None and target.parent_id == caller.id

    def ensure_access(self, caller: User, target_user_id: int) -> User:
        """
        校验访问权限并返回目标用户
        家长查询不存在的用户时返回未找到，其余无权访问的情况返回禁止访问
        """
        if caller.is_parent and caller.id != target_user_id:
            target = self.require_user(target_user_id)
            if target.parent_id == caller.id:
                return target
        elif self.can_access(caller, target_user_id):
            return self.require_user(target_user_id)

        logger.warning(f"用户 {caller.id} 无权访问用户 {target_user_id} 的数据")
        raise ForbiddenError("无权访问该用户的数据")
