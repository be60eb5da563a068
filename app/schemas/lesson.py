from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class LessonBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    content: Optional[str] = None
    video_url: Optional[str] = Field(default=None, max_length=255)
    position: Optional[int] = Field(default=None, gt=0)

class LessonCreate(LessonBase):
    course_id: Optional[int] = None

class LessonUpdate(LessonBase):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    video_url: Optional[str] = Field(default=None, max_length=255)
    position: Optional[int] = Field(default=None, gt=0)
    course_id: Optional[int] = None

class Lesson(LessonBase):
    id: int
    course_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
