from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin

class Certificate(TimestampMixin, Base):
    __tablename__ = "certificates"
    __table_args__ = (
        UniqueConstraint("user_id", "program_id"),
        {"comment": "Stores certificates issued to users upon program completion"},
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True,
                     comment="Foreign key reference to the users table")
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True,
                        comment="Foreign key reference to the programs table")
    url = Column(String(255), nullable=False, comment="URL to access the certificate")
    issued_at = Column(DateTime(timezone=True), nullable=False, index=True,
                       comment="The date and time when the certificate was issued")

    user = relationship("User", back_populates="certificates")
    program = relationship("Program", back_populates="certificates")
