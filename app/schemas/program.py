from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from app.core.constants import ProgramTypeEnum

class ProgramBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    program_type: Optional[ProgramTypeEnum] = None

    model_config = ConfigDict(use_enum_values=True)

class ProgramCreate(ProgramBase):
    pass

class ProgramUpdate(ProgramBase):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    program_type: Optional[ProgramTypeEnum] = None

class Program(ProgramBase):
    id: int
    # Rows written outside this package may carry any string here.
    program_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
