from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship
from app.core.constants import PAYMENT_STATUS_TYPE, PaymentStatusEnum
from app.core.database import Base
from app.models.base import TimestampMixin
from app.models.enums import status_enum

class Payment(TimestampMixin, Base):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="amount"),
        {"comment": "Tracks payment information for program enrollments"},
    )

    id = Column(Integer, primary_key=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, index=True,
                           comment="Foreign key reference to the enrollments table")
    amount = Column(Numeric(10, 2), nullable=False, comment="The payment amount in decimal format")
    status = Column(status_enum(PaymentStatusEnum, PAYMENT_STATUS_TYPE), nullable=False, index=True,
                    comment="Current status of the payment: pending, paid, failed, or refunded")
    paid_at = Column(DateTime(timezone=True), nullable=True, index=True,
                     comment="The date and time when the payment was processed")

    enrollment = relationship("Enrollment", back_populates="payments")

    @property
    def user(self):
        return self.enrollment.user if self.enrollment else None
