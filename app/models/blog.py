from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.constants import BLOG_STATUS_TYPE, BlogStatusEnum
from app.core.database import Base
from app.models.base import TimestampMixin
from app.models.enums import status_enum

class Blog(TimestampMixin, Base):
    __tablename__ = "blogs"
    __table_args__ = {"comment": "Stores blogs created by users"}

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True,
                     comment="Foreign key reference to the users table")
    name = Column(String(255), nullable=False, comment="The name of the blog")
    content = Column(Text, nullable=False, comment="The content of the blog")
    status = Column(status_enum(BlogStatusEnum, BLOG_STATUS_TYPE), nullable=False, index=True,
                    comment="Current status of the blog: created, in_moderation, published, or archived")

    user = relationship("User", back_populates="blogs")
