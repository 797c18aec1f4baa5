from typing import List
from fastapi import APIRouter

from kidlearning.services.lesson_service import LessonService
from kidlearning.api.schemas.content_schemas import CategoryResponse, LessonResponse

router = APIRouter()
lesson_service = LessonService()

@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories():
    """
    获取所有学习分类
    """
    return lesson_service.list_categories()

@router.get("/{category}", response_model=List[str])
async def get_category_items(category: str):
    """
    获取分类下的内容列表
    """
    return lesson_service.get_items(category)

@router.get("/{category}/{item}", response_model=LessonResponse)
async def get_lesson(category: str, item: str):
    """
    获取单个内容的课程详情
    """
    return lesson_service.get_lesson(category, item)
