import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from kidlearning.api.dependencies import get_current_user
from kidlearning.config.settings import settings
from kidlearning.models.user import User
from kidlearning.utils.database import get_db
from kidlearning.services.progress_service import ProgressService
from kidlearning.services.user_service import UserService
from kidlearning.api.schemas.progress_schemas import ActivityResponse
from kidlearning.utils.exceptions import KidLearningError

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/{user_id}", response_model=List[ActivityResponse])
async def get_recent_activities(
    user_id: int,
    limit: int = Query(
        settings.DEFAULT_ACTIVITY_LIMIT, description="返回条数",
        ge=1, le=settings.MAX_ACTIVITY_LIMIT
    ),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    获取用户最近的学习活动
    """
    try:
        UserService(db).ensure_access(current_user, user_id)
        return ProgressService(db).get_recent_activities(user_id, limit)
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"获取学习活动失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="获取学习活动失败"
        )
