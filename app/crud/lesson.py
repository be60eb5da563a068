from sqlalchemy.orm import Session
from typing import List, Optional

from app.crud.base import CRUDBase
from app.models.lesson import Lesson
from app.schemas.lesson import LessonCreate, LessonUpdate


class CRUDLesson(CRUDBase[Lesson, LessonCreate, LessonUpdate]):

    def get_by_course(self, db: Session, *, course_id: int, include_deleted: bool = False) -> List[Lesson]:
        """Lessons of a course in position order; unpositioned lessons come last."""
        return (
            self._query(db, include_deleted=include_deleted)
            .filter(Lesson.course_id == course_id)
            .order_by(Lesson.position.is_(None), Lesson.position, Lesson.id)
            .all()
        )

    def get_by_position(self, db: Session, *, course_id: int, position: int) -> Optional[Lesson]:
        return (
            self._query(db)
            .filter(Lesson.course_id == course_id, Lesson.position == position)
            .first()
        )


lesson = CRUDLesson(Lesson)
