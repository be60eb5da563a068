from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.core.constants import PaymentStatusEnum


class PaymentBase(BaseModel):
    enrollment_id: int
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    paid_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(BaseModel):
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    status: Optional[PaymentStatusEnum] = None
    paid_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)


class Payment(PaymentBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
