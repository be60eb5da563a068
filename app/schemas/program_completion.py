from pydantic import BaseModel, ConfigDict, model_validator
from typing import Optional
from datetime import datetime
from app.core.constants import ProgramCompletionStatusEnum


def check_completion_window(started_at: Optional[datetime], completed_at: Optional[datetime]) -> None:
    if started_at and completed_at and completed_at < started_at:
        raise ValueError("completed_at cannot be earlier than started_at")


class ProgramCompletionBase(BaseModel):
    user_id: int
    program_id: int
    status: ProgramCompletionStatusEnum = ProgramCompletionStatusEnum.PENDING
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)

    @model_validator(mode="after")
    def completed_after_started(self):
        check_completion_window(self.started_at, self.completed_at)
        return self


class ProgramCompletionCreate(ProgramCompletionBase):
    pass


class ProgramCompletionUpdate(BaseModel):
    status: Optional[ProgramCompletionStatusEnum] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)

    @model_validator(mode="after")
    def completed_after_started(self):
        check_completion_window(self.started_at, self.completed_at)
        return self


class ProgramCompletion(ProgramCompletionBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
