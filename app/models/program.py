from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin

class Program(TimestampMixin, Base):
    __tablename__ = "programs"
    __table_args__ = (
        CheckConstraint("price > 0", name="price"),
        {"comment": "Stores information about educational programs that students can enroll in"},
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, comment="The name of the program")
    price = Column(Numeric(10, 2), nullable=False, comment="The price of the program in decimal format")
    # Free text in the database; ProgramTypeEnum is enforced by the schemas.
    program_type = Column(String(255), nullable=True, comment="The type of program (certificate, degree, short_course)")

    module_links = relationship("ProgramModule", back_populates="program", passive_deletes="all")
    modules = relationship("Module", secondary="program_modules", back_populates="programs", viewonly=True)
    enrollments = relationship("Enrollment", back_populates="program", passive_deletes="all")
    completions = relationship("ProgramCompletion", back_populates="program", passive_deletes="all")
    certificates = relationship("Certificate", back_populates="program", passive_deletes="all")
