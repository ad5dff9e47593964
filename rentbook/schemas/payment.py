from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from rentbook.schemas.common import require_month, require_positive, require_value


class PaymentBase(BaseModel):
    tenant_id: int
    month: str  # "YYYY-MM"
    amount: Decimal

    @field_validator("month")
    @classmethod
    def valid_month(cls, v):
        return require_month(v)

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v):
        return require_positive(v)


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(BaseModel):
    # paid_at is set by the store and never changes
    tenant_id: Optional[int] = None
    month: Optional[str] = None
    amount: Optional[Decimal] = None

    @field_validator("month")
    @classmethod
    def valid_month(cls, v):
        return require_month(v)

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, v):
        return require_positive(v)

    @field_validator("tenant_id")
    @classmethod
    def tenant_not_null(cls, v):
        return require_value(v)


class PaymentOut(PaymentBase):
    id: int
    paid_at: datetime

    class Config:
        from_attributes = True


class PayerSummary(BaseModel):
    id: int
    first_name: str
    last_name: str
    house_id: int
    room_id: int

    class Config:
        from_attributes = True


class PaymentWithTenantOut(PaymentOut):
    """Payment row for the payments list; tenant is None once the tenant is deleted."""
    tenant: Optional[PayerSummary] = None


class TotalPaidOut(BaseModel):
    tenant_id: int
    total_paid: Decimal
