from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin

class TeachingGroup(TimestampMixin, Base):
    __tablename__ = "teaching_groups"
    __table_args__ = (
        UniqueConstraint("slug"),
        {"comment": "Stores information about teaching groups that teachers can be assigned to"},
    )

    id = Column(Integer, primary_key=True)
    slug = Column(String(100), nullable=False, comment="A unique identifier for the teaching group used in URLs")

    users = relationship("User", back_populates="teaching_group", passive_deletes="all")
