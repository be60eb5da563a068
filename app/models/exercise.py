from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin

class Exercise(TimestampMixin, Base):
    __tablename__ = "exercises"
    __table_args__ = {"comment": "Stores exercises associated with lessons"}

    id = Column(Integer, primary_key=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False, index=True,
                       comment="Foreign key reference to the lessons table")
    name = Column(String(255), nullable=False, comment="The name of the exercise")
    url = Column(String(255), nullable=False, comment="URL to access the exercise content")

    lesson = relationship("Lesson", back_populates="exercises")
