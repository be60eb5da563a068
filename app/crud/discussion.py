from typing import List
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.discussion import Discussion
from app.schemas.discussion import DiscussionCreate, DiscussionUpdate


class CRUDDiscussion(CRUDBase[Discussion, DiscussionCreate, DiscussionUpdate]):
    def get_by_lesson(self, db: Session, *, lesson_id: int) -> List[Discussion]:
        return (
            db.query(Discussion)
            .filter(Discussion.lesson_id == lesson_id)
            .order_by(Discussion.created_at, Discussion.id)
            .all()
        )

    def get_by_user(self, db: Session, *, user_id: int) -> List[Discussion]:
        return db.query(Discussion).filter(Discussion.user_id == user_id).order_by(Discussion.id).all()


discussion = CRUDDiscussion(Discussion)
