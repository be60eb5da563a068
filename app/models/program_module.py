from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.core.database import Base

class ProgramModule(Base):
    __tablename__ = "program_modules"
    __table_args__ = {"comment": "Junction table for the many-to-many relationship between modules and programs"}

    module_id = Column(Integer, ForeignKey("modules.id"), primary_key=True, index=True,
                       comment="Foreign key reference to the modules table")
    program_id = Column(Integer, ForeignKey("programs.id"), primary_key=True, index=True,
                        comment="Foreign key reference to the programs table")

    module = relationship("Module", back_populates="program_links")
    program = relationship("Program", back_populates="module_links")

program_modules = ProgramModule.__table__
