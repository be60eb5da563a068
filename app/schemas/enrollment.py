from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from app.core.constants import EnrollmentStatusEnum


class EnrollmentBase(BaseModel):
    user_id: int
    program_id: int
    status: EnrollmentStatusEnum = EnrollmentStatusEnum.PENDING

    model_config = ConfigDict(use_enum_values=True)


class EnrollmentCreate(EnrollmentBase):
    pass


class EnrollmentUpdate(BaseModel):
    status: Optional[EnrollmentStatusEnum] = None

    model_config = ConfigDict(use_enum_values=True)


class Enrollment(EnrollmentBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
