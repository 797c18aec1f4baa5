import logging
from typing import List, Dict, Any, Optional, Tuple
from sqlalchemy.orm import Session

from kidlearning.config.settings import settings
from kidlearning.content.catalog import Category, ContentCatalog, CATEGORY_TITLES
from kidlearning.models.activity import Activity, ActivityKind
from kidlearning.models.progress import Progress
from kidlearning.models.user import User
from kidlearning.repositories.activity_repository import ActivityRepository
from kidlearning.repositories.progress_repository import ProgressRepository
from kidlearning.utils.exceptions import InvalidCategoryError

logger = logging.getLogger(__name__)

# 分类测验（不针对单个内容）写入进度时使用的内容ID
CATEGORY_QUIZ_ITEM = "quiz"


class ProgressService:
    """学习进度服务：记录课程/测验完成情况，汇总家长看板数据"""

    def __init__(self, db: Session, catalog: Optional[ContentCatalog] = None):
        self.db = db
        self.catalog = catalog or ContentCatalog()
        self.progress_repo = ProgressRepository(db)
        self.activity_repo = ActivityRepository(db)

    def record_lesson_completion(self, user: User, category: str,
                                 item_id: str) -> Tuple[Progress, Activity]:
        """
        记录课程学习完成

        Args:
            user: 当前用户
            category: 分类
            item_id: 内容ID

        Returns:
            Tuple[Progress, Activity]: 更新后的进度和新追加的活动
        """
        cat = self.catalog.require_item(category, item_id)

        progress, activity = self._record(user, cat, item_id, ActivityKind.LESSON)
        logger.info(f"记录课程完成: 用户{user.id}, {cat.value}/{item_id}")
        return progress, activity

    def record_quiz_completion(self, user: User, category: str, score: int,
                               item_id: Optional[str] = None) -> Tuple[Progress, Activity]:
        """
        记录测验完成

        Args:
            user: 当前用户
            category: 分类
            score: 答对题数
            item_id: 内容ID，分类测验为空或 "quiz"

        Returns:
            Tuple[Progress, Activity]: 更新后的进度和新追加的活动
        """
        item_id = item_id or CATEGORY_QUIZ_ITEM
        if item_id == CATEGORY_QUIZ_ITEM:
            if not self.catalog.exists(category):
                raise InvalidCategoryError(category)
            cat = Category(category)
        else:
            cat = self.catalog.require_item(category, item_id)

        progress, activity = self._record(user, cat, item_id, ActivityKind.QUIZ, score)
        logger.info(f"记录测验完成: 用户{user.id}, {cat.value}/{item_id}, 得分{score}")
        return progress, activity

    def _record(self, user: User, cat: Category, item_id: str, kind: ActivityKind,
                score: Optional[int] = None) -> Tuple[Progress, Activity]:
        """进度写入和活动追加在同一个事务中提交，任一失败则整体回滚"""
        user_id = user.id
        try:
            progress = self.progress_repo.upsert(
                user_id=user_id,
                category=cat.value,
                item_id=item_id,
                completed=True,
                score=score,
                commit=False,
            )
            activity = self.activity_repo.append(
                user_id=user_id,
                category=cat.value,
                item_id=item_id,
                activity=kind.value,
                score=score,
                commit=False,
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"记录学习完成失败，已回滚: 用户{user_id}, {cat.value}/{item_id}: {e}")
            raise

        self.db.refresh(progress)
        self.db.refresh(activity)
        return progress, activity

    def get_progress(self, user_id: int, category: Optional[str] = None) -> List[Progress]:
        """获取用户进度，可按分类过滤"""
        if category is not None and not self.catalog.exists(category):
            raise InvalidCategoryError(category)
        return self.progress_repo.get_progress(user_id, category)

    def get_recent_activities(self, user_id: int, limit: Optional[int] = None) -> List[Activity]:
        """获取最近的学习活动"""
        if limit is None:
            limit = settings.DEFAULT_ACTIVITY_LIMIT
        return self.activity_repo.get_recent(user_id, limit)

    def get_progress_summary(self, user: User) -> Dict[str, Any]:
        """
        家长看板汇总：每个分类的完成数、完成百分比、最近一次测验得分，以及学习建议

        Args:
            user: 被查看的用户（通常是儿童账号）

        Returns:
            Dict: 汇总数据
        """
        records = self.progress_repo.get_progress(user.id)

        categories = []
        percentages: Dict[Category, int] = {}
        for cat in Category:
            items = set(self.catalog.items_of(cat))
            cat_records = [r for r in records if r.category == cat.value]
            completed = sum(1 for r in cat_records if r.completed and r.item_id in items)
            percentage = round(completed / len(items) * 100) if items else 0
            percentages[cat] = percentage

            scored = [r for r in cat_records if r.score is not None and r.completed_at is not None]
            latest = max(scored, key=lambda r: (r.completed_at, r.id)) if scored else None

            categories.append({
                "category": cat.value,
                "title": CATEGORY_TITLES[cat],
                "completed_items": completed,
                "total_items": len(items),
                "percentage": percentage,
                "latest_quiz_score": latest.score if latest else None,
            })

        return {
            "user_id": user.id,
            "child_name": user.child_name,
            "total_records": len(records),
            "categories": categories,
            "recommendations": self._recommendations(user, percentages, has_progress=bool(records)),
        }

    def _recommendations(self, user: User, percentages: Dict[Category, int],
                         has_progress: bool) -> List[Dict[str, str]]:
        name = user.child_name or user.username
        if not has_progress:
            return [{
                "code": "get_started",
                "title": "Get Started with Learning",
                "message": f"No learning activity detected yet. Encourage {name} to start exploring the lessons and quizzes.",
            }]

        recommendations = []
        if percentages[Category.ALPHABETS] < 30:
            recommendations.append({
                "code": "alphabets_practice",
                "title": "Alphabet Practice Needed",
                "message": f"{name} needs more practice with letters. Consider spending extra time on alphabet lessons.",
            })
        if percentages[Category.NUMBERS] > 50:
            recommendations.append({
                "code": "numbers_progress",
                "title": "Great Progress in Numbers!",
                "message": f"{name} has shown excellent progress in learning numbers. Consider introducing simple addition concepts.",
            })
        if percentages[Category.SHAPES] < 40:
            recommendations.append({
                "code": "shapes_focus",
                "title": "Focus on Shapes",
                "message": f"{name} could benefit from more practice with shapes. Try the shape quizzes to improve recognition.",
            })
        if all(p > 70 for p in percentages.values()):
            recommendations.append({
                "code": "outstanding",
                "title": "Outstanding Progress!",
                "message": f"{name} is doing amazing in all subjects! Consider introducing more advanced concepts or new learning areas.",
            })
        return recommendations
