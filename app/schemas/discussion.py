from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional
from datetime import datetime


class DiscussionBase(BaseModel):
    lesson_id: int
    user_id: int
    text: Dict[str, Any]


class DiscussionCreate(DiscussionBase):
    pass


class DiscussionUpdate(BaseModel):
    text: Optional[Dict[str, Any]] = None


class Discussion(DiscussionBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
