from sqlalchemy.orm import Session
from typing import Optional

from app.crud.base import CRUDBase
from app.models.teaching_group import TeachingGroup
from app.schemas.teaching_group import TeachingGroupCreate, TeachingGroupUpdate


class CRUDTeachingGroup(CRUDBase[TeachingGroup, TeachingGroupCreate, TeachingGroupUpdate]):
    def get_by_slug(self, db: Session, *, slug: str) -> Optional[TeachingGroup]:
        return db.query(TeachingGroup).filter(TeachingGroup.slug == slug).first()


teaching_group = CRUDTeachingGroup(TeachingGroup)
