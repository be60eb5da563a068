from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.core.database import Base

class CourseModule(Base):
    __tablename__ = "course_modules"
    __table_args__ = {"comment": "Junction table for the many-to-many relationship between courses and modules"}

    course_id = Column(Integer, ForeignKey("courses.id"), primary_key=True, index=True,
                       comment="Foreign key reference to the courses table")
    module_id = Column(Integer, ForeignKey("modules.id"), primary_key=True, index=True,
                       comment="Foreign key reference to the modules table")

    course = relationship("Course", back_populates="module_links")
    module = relationship("Module", back_populates="course_links")

course_modules = CourseModule.__table__
