from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

class CourseBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None

class CourseCreate(CourseBase):
    pass

class CourseUpdate(CourseBase):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None

class Course(CourseBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class CourseWithLessons(Course):
    lessons: List["Lesson"] = Field(default_factory=list)

from app.schemas.lesson import Lesson  # noqa: E402

CourseWithLessons.model_rebuild()
