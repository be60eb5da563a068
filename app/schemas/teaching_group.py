from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class TeachingGroupBase(BaseModel):
    slug: str = Field(min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

class TeachingGroupCreate(TeachingGroupBase):
    pass

class TeachingGroupUpdate(BaseModel):
    slug: Optional[str] = Field(default=None, min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

class TeachingGroup(TeachingGroupBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
