from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import SoftDeleteMixin, TimestampMixin

class Lesson(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "lessons"
    __table_args__ = (
        CheckConstraint("position > 0", name="position"),
        {"comment": "Stores individual learning units that make up courses"},
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, comment="The name of the lesson")
    content = Column(Text, nullable=True, comment="The textual content of the lesson")
    video_url = Column(String(255), nullable=True, comment="URL to the video content for the lesson")
    position = Column(Integer, nullable=True, comment="The order of the lesson within its course")
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=True, index=True,
                       comment="Foreign key reference to the courses table")

    course = relationship("Course", back_populates="lessons")
    quizzes = relationship("Quiz", back_populates="lesson", passive_deletes="all")
    exercises = relationship("Exercise", back_populates="lesson", passive_deletes="all")
    discussions = relationship("Discussion", back_populates="lesson", passive_deletes="all")
