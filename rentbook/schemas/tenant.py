from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rentbook.schemas.common import optional_text, require_positive, require_text, require_value
from rentbook.schemas.house import HouseSummary
from rentbook.schemas.payment import PaymentOut
from rentbook.schemas.room import RoomSummary


class PaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMESTRIAL = "semestrial"
    ANNUAL = "annual"


class PaymentStatus(str, Enum):
    UP_TO_DATE = "up_to_date"
    OVERDUE = "overdue"


class TenantProfile(BaseModel):
    """Person and rent fields shared by every tenant payload."""
    first_name: str
    last_name: str
    phone: str
    email: Optional[str] = None
    entry_date: date = Field(default_factory=date.today)  # new tenants start today unless told otherwise
    payment_frequency: PaymentFrequency = Field(default=PaymentFrequency.MONTHLY, validate_default=True)
    rent_amount: Decimal  # monthly rent

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v):
        return optional_text(v)

    @field_validator("rent_amount")
    @classmethod
    def positive_rent(cls, v):
        return require_positive(v)

    class Config:
        use_enum_values = True


class TenantBase(TenantProfile):
    house_id: int
    room_id: int


class TenantCreate(TenantBase):
    pass


class TenantWithRoomCreate(TenantProfile):
    """Tenant created together with the room they rent, in one transaction."""
    house_id: int
    room_name: str
    room_type: str

    @field_validator("room_name", "room_type")
    @classmethod
    def room_not_blank(cls, v):
        return require_text(v)


class TenantUpdate(BaseModel):
    house_id: Optional[int] = None
    room_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    entry_date: Optional[date] = None
    payment_frequency: Optional[PaymentFrequency] = None
    rent_amount: Optional[Decimal] = None

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v):
        return optional_text(v)

    @field_validator("rent_amount")
    @classmethod
    def positive_rent(cls, v):
        return require_positive(v)

    @field_validator("house_id", "room_id", "entry_date", "payment_frequency")
    @classmethod
    def not_null(cls, v):
        return require_value(v)

    class Config:
        use_enum_values = True


class TenantOut(TenantBase):
    id: int

    class Config:
        from_attributes = True
        use_enum_values = True


class TenantDetailsOut(TenantOut):
    # None when the referenced house/room row no longer exists
    house: Optional[HouseSummary] = None
    room: Optional[RoomSummary] = None
    payment_status: PaymentStatus = PaymentStatus.UP_TO_DATE  # recomputed on every read
    last_payment: Optional[PaymentOut] = None


class OverduePaymentOut(BaseModel):
    tenant: TenantDetailsOut
    month: str  # always the current month
    amount: Decimal  # the tenant's rent_amount
