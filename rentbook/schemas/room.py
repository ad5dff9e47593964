from pydantic import BaseModel, field_validator
from typing import Optional

from rentbook.schemas.common import require_text, require_value


class RoomBase(BaseModel):
    house_id: int
    name: str
    type: str  # free-text label

    @field_validator("name", "type")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    house_id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None

    @field_validator("name", "type")
    @classmethod
    def not_blank(cls, v):
        return require_text(v)

    @field_validator("house_id")
    @classmethod
    def house_not_null(cls, v):
        return require_value(v)


class RoomOut(RoomBase):
    id: int

    class Config:
        from_attributes = True


class RoomSummary(BaseModel):
    """Room fields nested in a tenant's detail view."""
    id: int
    name: str
    type: str

    class Config:
        from_attributes = True
