import logging
import random
from typing import Any, Dict, List, Optional

from kidlearning.config.settings import settings
from kidlearning.content.catalog import ContentCatalog, LessonContent
from kidlearning.quiz.question_generator import QuestionGenerator, QuizQuestion

logger = logging.getLogger(__name__)


class LessonService:
    """课程服务，负责学习内容和测验题目的获取"""

    def __init__(self, catalog: Optional[ContentCatalog] = None,
                 rng: Optional[random.Random] = None):
        self.catalog = catalog or ContentCatalog()
        if rng is None:
            rng = random.Random(settings.QUIZ_RANDOM_SEED)
        self.generator = QuestionGenerator(
            catalog=self.catalog,
            rng=rng,
            item_quiz_size=settings.ITEM_QUIZ_SIZE,
            category_quiz_size=settings.CATEGORY_QUIZ_SIZE,
            min_options=settings.MIN_QUIZ_OPTIONS,
        )

    def list_categories(self) -> List[Dict[str, Any]]:
        """获取所有分类"""
        return self.catalog.categories()

    def get_items(self, category: str) -> List[str]:
        """获取分类下的内容列表"""
        return self.catalog.items_of(category)

    def get_lesson(self, category: str, item: str) -> LessonContent:
        """获取单个内容的课程详情"""
        return self.catalog.lesson_of(category, item)

    def get_quiz(self, category: str, item: Optional[str] = None) -> List[QuizQuestion]:
        """获取测验题目，未指定内容时生成整个分类的随机测验"""
        questions = self.generator.generate(category, item)
        logger.info(f"生成测验: 分类={category}, 内容={item or '全部'}, 题目数={len(questions)}")
        return questions
