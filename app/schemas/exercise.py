from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ExerciseBase(BaseModel):
    lesson_id: int
    name: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1, max_length=255)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    url: Optional[str] = Field(default=None, min_length=1, max_length=255)


class Exercise(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
