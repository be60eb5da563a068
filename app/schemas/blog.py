from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from app.core.constants import BlogStatusEnum


class BlogBase(BaseModel):
    user_id: int
    name: str = Field(min_length=1, max_length=255)
    content: str
    status: BlogStatusEnum = BlogStatusEnum.CREATED

    model_config = ConfigDict(use_enum_values=True)


class BlogCreate(BlogBase):
    pass


class BlogUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    status: Optional[BlogStatusEnum] = None

    model_config = ConfigDict(use_enum_values=True)


class Blog(BlogBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
