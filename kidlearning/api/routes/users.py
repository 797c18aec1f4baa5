import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kidlearning.api.dependencies import get_current_user
from kidlearning.models.user import User
from kidlearning.utils.database import get_db
from kidlearning.services.user_service import UserService
from kidlearning.api.schemas.user_schemas import (
    LoginRequest, ParentRegister, ChildCreate, UserResponse
)
from kidlearning.utils.exceptions import KidLearningError

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/login", response_model=UserResponse)
async def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    占位登录：儿童选择头像，家长输入用户名和密码
    """
    try:
        user_service = UserService(db)
        return user_service.login(
            avatar=payload.avatar,
            username=payload.username,
            password=payload.password
        )
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"登录失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="登录失败"
        )

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_parent(payload: ParentRegister, db: Session = Depends(get_db)):
    """
    家长注册
    """
    try:
        user_service = UserService(db)
        return user_service.register_parent(
            username=payload.username,
            password=payload.password,
            confirm_password=payload.confirm_password
        )
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"家长注册失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="家长注册失败"
        )

@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """
    获取当前登录用户
    """
    return current_user

@router.post("/children", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_child(
    payload: ChildCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    家长添加儿童账号
    """
    try:
        user_service = UserService(db)
        return user_service.create_child(
            current_user,
            child_name=payload.child_name,
            child_avatar=payload.child_avatar,
            username=payload.username
        )
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"添加儿童账号失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="添加儿童账号失败"
        )

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    获取用户信息
    """
    return UserService(db).ensure_access(current_user, user_id)

@router.get("/{parent_id}/children", response_model=List[UserResponse])
async def get_children(
    parent_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    获取家长名下的儿童账号
    """
    user_service = UserService(db)
    parent = user_service.ensure_access(current_user, parent_id)
    if not parent.is_parent:
        return []
    return user_service.get_children(parent.id)
