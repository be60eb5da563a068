from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import SoftDeleteMixin, TimestampMixin

class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email"),
        {"comment": "Stores all user accounts including students, teachers, and administrators"},
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, comment="The name for the user account")
    email = Column(String(255), nullable=False, index=True,
                   comment="The email address for the user account, must be unique")
    password_hash = Column(String(255), nullable=True, comment="The hashed password for the user account")
    # varchar in the database; UserRoleEnum is enforced by the schemas.
    role = Column(String(50), nullable=False, index=True,
                  comment="User role determining permissions: student, teacher, or admin")
    teaching_group_id = Column(Integer, ForeignKey("teaching_groups.id"), nullable=True, index=True,
                               comment="Foreign key reference to the teaching_groups table for teachers")

    teaching_group = relationship("TeachingGroup", back_populates="users")
    enrollments = relationship("Enrollment", back_populates="user", passive_deletes="all")
    program_completions = relationship("ProgramCompletion", back_populates="user", passive_deletes="all")
    certificates = relationship("Certificate", back_populates="user", passive_deletes="all")
    discussions = relationship("Discussion", back_populates="user", passive_deletes="all")
    blogs = relationship("Blog", back_populates="user", passive_deletes="all")
