from pydantic import BaseModel, EmailStr, field_validator, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.core.constants import UserRoleEnum

class UserBase(BaseModel):
    """Base user schema with common fields."""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    role: UserRoleEnum = UserRoleEnum.STUDENT
    teaching_group_id: Optional[int] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower()

class UserCreate(UserBase):
    """Schema for creating a user; the password is hashed by the caller."""
    password_hash: Optional[str] = Field(default=None, max_length=255)

class UserUpdate(BaseModel):
    """Schema for updating a user's profile."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[UserRoleEnum] = None
    password_hash: Optional[str] = Field(default=None, max_length=255)
    teaching_group_id: Optional[int] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name")
    def not_empty(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty")
        return v

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower() if v else v

class User(BaseModel):
    """Main user schema for reading user data."""
    id: int
    name: str
    email: str
    role: str
    teaching_group_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
