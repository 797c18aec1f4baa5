import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from kidlearning.api.dependencies import get_current_user
from kidlearning.models.user import User
from kidlearning.utils.database import get_db
from kidlearning.services.progress_service import ProgressService
from kidlearning.services.user_service import UserService
from kidlearning.api.schemas.progress_schemas import (
    LessonCompletionRequest, QuizCompletionRequest, CompletionResponse,
    ProgressResponse, ProgressSummaryResponse
)
from kidlearning.utils.exceptions import KidLearningError

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/lesson", response_model=CompletionResponse, status_code=status.HTTP_201_CREATED)
async def complete_lesson(
    payload: LessonCompletionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    提交课程学习完成
    """
    try:
        progress_service = ProgressService(db)
        progress, activity = progress_service.record_lesson_completion(
            current_user, payload.category, payload.item_id
        )
        return {"progress": progress, "activity": activity}
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"记录课程完成失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="记录课程完成失败"
        )

@router.post("/quiz", response_model=CompletionResponse, status_code=status.HTTP_201_CREATED)
async def complete_quiz(
    payload: QuizCompletionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    提交测验完成
    """
    try:
        progress_service = ProgressService(db)
        progress, activity = progress_service.record_quiz_completion(
            current_user, payload.category, payload.score, payload.item_id
        )
        return {"progress": progress, "activity": activity}
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"记录测验完成失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="记录测验完成失败"
        )

@router.get("/{user_id}", response_model=List[ProgressResponse])
async def get_user_progress(
    user_id: int,
    category: Optional[str] = Query(None, description="分类"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    获取用户学习进度
    """
    try:
        UserService(db).ensure_access(current_user, user_id)
        return ProgressService(db).get_progress(user_id, category)
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"获取学习进度失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="获取学习进度失败"
        )

@router.get("/{user_id}/summary", response_model=ProgressSummaryResponse)
async def get_progress_summary(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    获取家长看板汇总数据
    """
    try:
        target = UserService(db).ensure_access(current_user, user_id)
        return ProgressService(db).get_progress_summary(target)
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"获取学习汇总失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="获取学习汇总失败"
        )
