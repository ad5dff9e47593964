from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from rentbook.schemas.common import require_text


class HouseBase(BaseModel):
    name: str
    address: str

    @field_validator("name", "address")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)


class HouseCreate(HouseBase):
    pass


class HouseUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name", "address")
    @classmethod
    def not_blank(cls, v):
        # only runs for fields present in the PATCH body
        return require_text(v)


class HouseOut(HouseBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class HouseSummary(BaseModel):
    """House fields nested in a tenant's detail view."""
    id: int
    name: str
    address: str

    class Config:
        from_attributes = True


class HouseStatsOut(HouseOut):
    tenant_count: int = 0
    total_rent: Decimal = Decimal("0")  # sum of the tenants' monthly rent
    overdue_count: int = 0  # tenants overdue for the current month
    stats_degraded: bool = False  # True when the stats could not be read; counts are zeros
