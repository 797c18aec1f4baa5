import pytest

from kidlearning.models.user import User
from kidlearning.services.user_service import UserService
from kidlearning.utils.exceptions import (
    ForbiddenError, UnauthorizedError, UserNotFoundError, ValidationError
)


def test_default_users(db_session):
    """默认账号：一个家长，三个儿童"""
    user_service = UserService(db_session)

    parent = user_service.get_user_by_id(1)
    assert parent.username == "parent"
    assert parent.is_parent
    assert parent.parent_id is None

    children = user_service.get_children(parent.id)
    assert [(c.id, c.child_avatar, c.child_name) for c in children] == [
        (2, "red", "Red"), (3, "blue", "Blue"), (4, "green", "Green")
    ]


def test_bootstrap_is_idempotent(db_session):
    """重复初始化不会新增账号"""
    assert UserService(db_session).bootstrap_default_users() == []


def test_login(db_session):
    """测试占位登录"""
    user_service = UserService(db_session)

    assert user_service.login(avatar="blue").id == 3
    assert user_service.login(username="parent", password="password123").id == 1

    with pytest.raises(UnauthorizedError):
        user_service.login(username="parent", password="wrong")
    with pytest.raises(UnauthorizedError):
        user_service.login(avatar="purple")
    with pytest.raises(ValidationError):
        user_service.login(username="parent")


def test_can_access(db_session):
    """本人和所属家长可以访问，其他人不能访问"""
    user_service = UserService(db_session)
    parent = user_service.get_user_by_id(1)
    red = user_service.get_user_by_id(2)

    assert user_service.can_access(red, 2)
    assert not user_service.can_access(red, 3)
    assert not user_service.can_access(red, 1)
    assert user_service.can_access(parent, 3)
    assert user_service.can_access(parent, 1)

    other_parent = user_service.register_parent("other", "secret", "secret")
    assert not user_service.can_access(other_parent, 3)
    with pytest.raises(ForbiddenError):
        user_service.ensure_access(other_parent, 3)


def test_ensure_access_missing_user(db_session):
    """访问不存在的用户返回未找到，儿童访问他人仍是禁止访问"""
    user_service = UserService(db_session)
    parent = user_service.get_user_by_id(1)
    with pytest.raises(UserNotFoundError):
        user_service.ensure_access(parent, 999)
    assert user_service.ensure_access(parent, 3).id == 3

    red = user_service.get_user_by_id(2)
    with pytest.raises(ForbiddenError):
        user_service.ensure_access(red, 999)

    ghost = User(id=998, username="ghost", is_parent=False)
    with pytest.raises(UserNotFoundError):
        user_service.ensure_access(ghost, 998)
