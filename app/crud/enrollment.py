from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.constants import EnrollmentStatusEnum
from app.crud.base import CRUDBase
from app.models.enrollment import Enrollment
from app.schemas.enrollment import EnrollmentCreate, EnrollmentUpdate


class CRUDEnrollment(CRUDBase[Enrollment, EnrollmentCreate, EnrollmentUpdate]):
    def get_by_user_and_program(self, db: Session, *, user_id: int, program_id: int) -> Optional[Enrollment]:
        return db.query(Enrollment).filter(
            Enrollment.user_id == user_id,
            Enrollment.program_id == program_id
        ).first()

    def get_by_user(self, db: Session, *, user_id: int, status: Optional[EnrollmentStatusEnum] = None) -> List[Enrollment]:
        query = db.query(Enrollment).filter(Enrollment.user_id == user_id)
        if status is not None:
            query = query.filter(Enrollment.status == EnrollmentStatusEnum(status))
        return query.order_by(Enrollment.id).all()

    def get_by_program(self, db: Session, *, program_id: int, status: Optional[EnrollmentStatusEnum] = None) -> List[Enrollment]:
        query = db.query(Enrollment).filter(Enrollment.program_id == program_id)
        if status is not None:
            query = query.filter(Enrollment.status == EnrollmentStatusEnum(status))
        return query.order_by(Enrollment.id).all()

    def get_by_status(self, db: Session, *, status: EnrollmentStatusEnum, skip: int = 0, limit: int = 100) -> List[Enrollment]:
        return (
            db.query(Enrollment)
            .filter(Enrollment.status == EnrollmentStatusEnum(status))
            .order_by(Enrollment.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def set_status(self, db: Session, *, enrollment: Enrollment, status: EnrollmentStatusEnum) -> Enrollment:
        return self.update(db, db_obj=enrollment, obj_in={"status": EnrollmentStatusEnum(status)})


enrollment = CRUDEnrollment(Enrollment)
