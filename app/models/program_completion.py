from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.constants import PROGRAM_COMPLETION_STATUS_TYPE, ProgramCompletionStatusEnum
from app.core.database import Base
from app.models.base import TimestampMixin
from app.models.enums import status_enum

class ProgramCompletion(TimestampMixin, Base):
    __tablename__ = "program_completions"
    __table_args__ = (
        UniqueConstraint("user_id", "program_id"),
        {"comment": "Tracks user progress and completion of educational programs"},
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True,
                     comment="Foreign key reference to the users table")
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True,
                        comment="Foreign key reference to the programs table")
    status = Column(status_enum(ProgramCompletionStatusEnum, PROGRAM_COMPLETION_STATUS_TYPE), nullable=False,
                    index=True,
                    comment="Current status of the program completion: active, completed, pending, or cancelled")
    started_at = Column(DateTime(timezone=True), nullable=True,
                        comment="The date and time when the user started the program")
    completed_at = Column(DateTime(timezone=True), nullable=True,
                          comment="The date and time when the user completed the program")

    user = relationship("User", back_populates="program_completions")
    program = relationship("Program", back_populates="completions")
