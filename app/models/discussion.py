from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin
from app.models.quiz import JSONDocument

class Discussion(TimestampMixin, Base):
    __tablename__ = "discussions"
    __table_args__ = {"comment": "Stores discussions associated with lessons"}

    id = Column(Integer, primary_key=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False, index=True,
                       comment="Foreign key reference to the lessons table")
    text = Column(JSONDocument, nullable=False, comment="JSONB structure containing discussion content")
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True,
                     comment="Foreign key reference to the users table")

    lesson = relationship("Lesson", back_populates="discussions")
    user = relationship("User", back_populates="discussions")
