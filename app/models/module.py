from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import SoftDeleteMixin, TimestampMixin

class Module(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "modules"
    __table_args__ = {"comment": "Stores information about modules that group related courses"}

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, comment="The name of the module")
    description = Column(Text, nullable=True, comment="Detailed description of the module content")

    course_links = relationship("CourseModule", back_populates="module", passive_deletes="all")
    program_links = relationship("ProgramModule", back_populates="module", passive_deletes="all")
    courses = relationship("Course", secondary="course_modules", back_populates="modules", viewonly=True)
    programs = relationship("Program", secondary="program_modules", back_populates="modules", viewonly=True)
