from sqlalchemy.orm import Session, selectinload
from typing import List, Optional

from app.crud.base import CRUDBase
from app.models.course import Course
from app.models.course_module import CourseModule
from app.schemas.course import CourseCreate, CourseUpdate


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def get_with_lessons(self, db: Session, id: int) -> Optional[Course]:
        return (
            self._query(db)
            .options(selectinload(Course.lessons))
            .filter(Course.id == id)
            .first()
        )

    def get_by_module(self, db: Session, *, module_id: int, include_deleted: bool = False) -> List[Course]:
        return (
            self._query(db, include_deleted=include_deleted)
            .join(CourseModule, CourseModule.course_id == Course.id)
            .filter(CourseModule.module_id == module_id)
            .order_by(Course.id)
            .all()
        )

    def search_by_name(self, db: Session, *, term: str, skip: int = 0, limit: int = 100) -> List[Course]:
        return (
            self._query(db)
            .filter(Course.name.ilike(f"%{term}%"))
            .order_by(Course.name)
            .offset(skip)
            .limit(limit)
            .all()
        )


course = CRUDCourse(Course)
