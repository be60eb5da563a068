from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.constants import UserRoleEnum
from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return self._query(db).filter(User.email == email.lower()).first()

    def get_by_email_with_soft_deleted(self, db: Session, *, email: str) -> Optional[User]:
        return self._query(db, include_deleted=True).filter(User.email == email.lower()).first()

    def get_by_role(self, db: Session, *, role: UserRoleEnum, skip: int = 0, limit: int = 100) -> List[User]:
        return (
            self._query(db)
            .filter(User.role == UserRoleEnum(role).value)
            .order_by(User.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_teaching_group(self, db: Session, *, teaching_group_id: int) -> List[User]:
        return (
            self._query(db)
            .filter(User.teaching_group_id == teaching_group_id)
            .order_by(User.id)
            .all()
        )

    def update_password_hash(self, db: Session, *, user: User, password_hash: str) -> User:
        """Replace a user's password hash; hashing happens in the caller."""
        return self.update(db, db_obj=user, obj_in={"password_hash": password_hash})


user = CRUDUser(User)
