from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class CertificateBase(BaseModel):
    user_id: int
    program_id: int
    url: str = Field(min_length=1, max_length=255)
    issued_at: datetime


class CertificateCreate(CertificateBase):
    pass


class CertificateUpdate(BaseModel):
    url: Optional[str] = Field(default=None, min_length=1, max_length=255)
    issued_at: Optional[datetime] = None


class Certificate(CertificateBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
