from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime


class QuizAnswer(BaseModel):
    text: str
    is_correct: bool = False


class QuizQuestion(BaseModel):
    text: str
    answers: List[QuizAnswer] = Field(default_factory=list)
    # Follow-up questions, e.g. asked after a wrong answer
    children: List["QuizQuestion"] = Field(default_factory=list)


class QuizContent(BaseModel):
    questions: List[QuizQuestion] = Field(default_factory=list)


def validate_quiz_content(v: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    # Stored as given; only the shape is checked.
    if v is not None:
        QuizContent.model_validate(v)
    return v


class QuizBase(BaseModel):
    lesson_id: int
    name: str = Field(min_length=1, max_length=255)
    content: Dict[str, Any]

    @field_validator("content")
    def check_content(cls, v):
        return validate_quiz_content(v)


class QuizCreate(QuizBase):
    pass


class QuizUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[Dict[str, Any]] = None

    @field_validator("content")
    def check_content(cls, v):
        return validate_quiz_content(v)


class Quiz(QuizBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
