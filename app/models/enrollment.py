from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.constants import ENROLLMENT_STATUS_TYPE, EnrollmentStatusEnum
from app.core.database import Base
from app.models.base import TimestampMixin
from app.models.enums import status_enum

class Enrollment(TimestampMixin, Base):
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "program_id"),
        {"comment": "Tracks user enrollment in educational programs"},
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True,
                     comment="Foreign key reference to the users table")
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True,
                        comment="Foreign key reference to the programs table")
    status = Column(status_enum(EnrollmentStatusEnum, ENROLLMENT_STATUS_TYPE), nullable=False, index=True,
                    comment="Current status of the enrollment: active, pending, cancelled, or completed")

    user = relationship("User", back_populates="enrollments")
    program = relationship("Program", back_populates="enrollments")
    payments = relationship("Payment", back_populates="enrollment", passive_deletes="all")
