from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import SoftDeleteMixin, TimestampMixin

class Course(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "courses"
    __table_args__ = {"comment": "Stores information about individual courses"}

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, comment="The name of the course")
    description = Column(Text, nullable=True, comment="Detailed description of the course content")

    lessons = relationship("Lesson", back_populates="course", order_by="Lesson.position", passive_deletes="all")
    module_links = relationship("CourseModule", back_populates="course", passive_deletes="all")
    modules = relationship("Module", secondary="course_modules", back_populates="courses", viewonly=True)

    @property
    def live_lessons(self):
        return [lesson for lesson in self.lessons if lesson.deleted_at is None]
