import logging
from fastapi import APIRouter, HTTPException, status

from kidlearning.services.lesson_service import LessonService
from kidlearning.api.schemas.content_schemas import QuizResponse
from kidlearning.utils.exceptions import KidLearningError

logger = logging.getLogger(__name__)
router = APIRouter()
lesson_service = LessonService()

def _build_quiz(category: str, item: str = None) -> dict:
    try:
        questions = lesson_service.get_quiz(category, item)
        return {
            "category": category,
            "item": item,
            "questions": questions
        }
    except KidLearningError:
        raise
    except Exception as e:
        logger.error(f"生成测验题目失败: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="生成测验题目失败"
        )

@router.get("/{category}", response_model=QuizResponse)
async def get_category_quiz(category: str):
    """
    获取分类随机测验
    """
    return _build_quiz(category)

@router.get("/{category}/{item}", response_model=QuizResponse)
async def get_item_quiz(category: str, item: str):
    """
    获取单个内容的测验
    """
    return _build_quiz(category, item)
