from typing import List
from sqlalchemy.orm import Session
from app.core.constants import BlogStatusEnum
from app.crud.base import CRUDBase
from app.models.blog import Blog
from app.schemas.blog import BlogCreate, BlogUpdate


class CRUDBlog(CRUDBase[Blog, BlogCreate, BlogUpdate]):
    def get_by_user(self, db: Session, *, user_id: int) -> List[Blog]:
        return db.query(Blog).filter(Blog.user_id == user_id).order_by(Blog.id).all()

    def get_by_status(self, db: Session, *, status: BlogStatusEnum, skip: int = 0, limit: int = 100) -> List[Blog]:
        return (
            db.query(Blog)
            .filter(Blog.status == BlogStatusEnum(status))
            .order_by(Blog.created_at.desc(), Blog.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_published(self, db: Session, *, skip: int = 0, limit: int = 100) -> List[Blog]:
        return self.get_by_status(db, status=BlogStatusEnum.PUBLISHED, skip=skip, limit=limit)

    def set_status(self, db: Session, *, blog: Blog, status: BlogStatusEnum) -> Blog:
        return self.update(db, db_obj=blog, obj_in={"status": BlogStatusEnum(status)})


blog = CRUDBlog(Blog)
