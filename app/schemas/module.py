from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class ModuleBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None

class ModuleCreate(ModuleBase):
    pass

class ModuleUpdate(ModuleBase):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None

class Module(ModuleBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
