from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.constants import PaymentStatusEnum
from app.crud.base import CRUDBase
from app.models.enrollment import Enrollment
from app.models.payment import Payment
from app.schemas.payment import PaymentCreate, PaymentUpdate


class CRUDPayment(CRUDBase[Payment, PaymentCreate, PaymentUpdate]):
    def get_by_enrollment(self, db: Session, *, enrollment_id: int) -> List[Payment]:
        return (
            db.query(Payment)
            .filter(Payment.enrollment_id == enrollment_id)
            .order_by(Payment.id)
            .all()
        )

    def get_by_user(self, db: Session, *, user_id: int) -> List[Payment]:
        return (
            db.query(Payment)
            .join(Enrollment, Payment.enrollment_id == Enrollment.id)
            .filter(Enrollment.user_id == user_id)
            .order_by(Payment.id)
            .all()
        )

    def get_by_status(
        self,
        db: Session,
        *,
        status: PaymentStatusEnum,
        paid_from: Optional[datetime] = None,
        paid_to: Optional[datetime] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Payment]:
        query = db.query(Payment).filter(Payment.status == PaymentStatusEnum(status))
        if paid_from:
            query = query.filter(Payment.paid_at >= paid_from)
        if paid_to:
            query = query.filter(Payment.paid_at <= paid_to)
        return query.order_by(Payment.id).offset(skip).limit(limit).all()

    def get_paid_between(self, db: Session, *, start_date: datetime, end_date: datetime) -> List[Payment]:
        return (
            db.query(Payment)
            .filter(Payment.paid_at >= start_date, Payment.paid_at <= end_date)
            .order_by(Payment.paid_at)
            .all()
        )

    def total_paid_for_enrollment(self, db: Session, *, enrollment_id: int) -> Decimal:
        total = (
            db.query(func.coalesce(func.sum(Payment.amount), 0))
            .filter(
                Payment.enrollment_id == enrollment_id,
                Payment.status == PaymentStatusEnum.PAID
            )
            .scalar()
        )
        return Decimal(str(total))

    def mark_paid(self, db: Session, *, payment: Payment, paid_at: Optional[datetime] = None) -> Payment:
        return self.update(db, db_obj=payment, obj_in={
            "status": PaymentStatusEnum.PAID,
            "paid_at": paid_at or datetime.now(timezone.utc),
        })


payment = CRUDPayment(Payment)
