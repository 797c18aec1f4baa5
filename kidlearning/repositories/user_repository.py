from typing import Optional, List
from sqlalchemy.orm import Session
from kidlearning.models.user import User
from kidlearning.repositories.base import BaseRepository
from kidlearning.utils.database import db_retry


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Session):
        super().__init__(db, User)

    @db_retry
    def get_by_username(self, username: str) -> Optional[User]:
        """根据用户名获取用户（取第一条匹配）"""
        return self.db.query(User).filter(
            User.username == username
        ).order_by(User.id).first()

    @db_retry
    def get_by_avatar(self, avatar: str) -> Optional[User]:
        """根据头像获取儿童账号"""
        return self.db.query(User).filter(
            User.child_avatar == avatar,
            User.is_parent == False
        ).order_by(User.id).first()

    @db_retry
    def get_children(self, parent_id: int) -> List[User]:
        """获取家长名下的所有儿童账号"""
        return self.db.query(User).filter(
            User.parent_id == parent_id
        ).order_by(User.id).all()
