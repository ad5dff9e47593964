import logging
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from rentbook.core.errors import RoomHouseMismatchError
from rentbook.crud import payment as payment_crud
from rentbook.crud.base import apply_partial_update, delete_row, notify, store_operation
from rentbook.models.house import House
from rentbook.models.room import Room
from rentbook.models.tenant import Tenant
from rentbook.schemas.house import HouseSummary
from rentbook.schemas.payment import PaymentOut
from rentbook.schemas.room import RoomSummary
from rentbook.schemas.tenant import (
    TenantCreate,
    TenantDetailsOut,
    TenantOut,
    TenantUpdate,
    TenantWithRoomCreate,
)
from rentbook.services import payment_status

logger = logging.getLogger(__name__)


def _newest_first(q):
    return q.order_by(Tenant.entry_date.desc(), Tenant.id.desc())


def _check_room_belongs_to_house(db: Session, house_id: int, room_id: int) -> None:
    room = db.query(Room).filter(Room.id == room_id).first()
    if room is None:
        raise RoomHouseMismatchError(f"Room {room_id} does not exist")
    if room.house_id != house_id:
        raise RoomHouseMismatchError(
            f"Room {room_id} belongs to house {room.house_id}, not house {house_id}"
        )


@store_operation
def get_all(db: Session) -> List[Tenant]:
    return _newest_first(db.query(Tenant)).all()


@store_operation
def get_by_id(db: Session, tenant_id: int) -> Optional[Tenant]:
    return db.query(Tenant).filter(Tenant.id == tenant_id).first()


@store_operation
def get_by_house_id(db: Session, house_id: int) -> List[Tenant]:
    return _newest_first(db.query(Tenant).filter(Tenant.house_id == house_id)).all()


@store_operation
def create(db: Session, payload: TenantCreate) -> int:
    """Create a tenant in an existing room. The room must belong to payload.house_id."""
    _check_room_belongs_to_house(db, payload.house_id, payload.room_id)
    tenant = Tenant(**payload.model_dump())
    db.add(tenant)
    db.commit()
    notify("tenant", "created", tenant.id)
    return tenant.id


@store_operation
def create_with_room(db: Session, payload: TenantWithRoomCreate) -> Tuple[int, int]:
    """
    Create a room in payload.house_id and the tenant renting it, in one
    transaction: if the tenant insert fails the room is rolled back too.

    Returns (tenant_id, room_id).
    """
    room = Room(house_id=payload.house_id, name=payload.room_name, type=payload.room_type)
    db.add(room)
    db.flush()  # assigns room.id inside the open transaction

    tenant = Tenant(
        room_id=room.id,
        **payload.model_dump(exclude={"room_name", "room_type"}),
    )
    db.add(tenant)
    db.commit()

    notify("room", "created", room.id)
    notify("tenant", "created", tenant.id)
    return tenant.id, room.id


@store_operation
def update(db: Session, tenant_id: int, payload: TenantUpdate) -> int:
    data = payload.model_dump(exclude_unset=True)
    if not data:
        return 0

    if "house_id" in data or "room_id" in data:
        current = db.query(Tenant).filter(Tenant.id == tenant_id).first()
        if current is None:
            return 0
        _check_room_belongs_to_house(
            db,
            data.get("house_id", current.house_id),
            data.get("room_id", current.room_id),
        )

    count = apply_partial_update(db, Tenant, tenant_id, data)
    if count:
        notify("tenant", "updated", tenant_id)
    return count


@store_operation
def delete(db: Session, tenant_id: int) -> None:
    # Payments are kept: they are the rent history
    if delete_row(db, Tenant, tenant_id):
        notify("tenant", "deleted", tenant_id)


def _details_query(db: Session):
    # LEFT JOINs: a deleted house/room leaves house/room as None instead of dropping the tenant
    return (
        db.query(Tenant, House, Room)
        .outerjoin(House, House.id == Tenant.house_id)
        .outerjoin(Room, Room.id == Tenant.room_id)
    )


def _to_details(tenant, house, room, status, last_payment) -> TenantDetailsOut:
    return TenantDetailsOut(
        **TenantOut.model_validate(tenant).model_dump(),
        house=HouseSummary.model_validate(house) if house is not None else None,
        room=RoomSummary.model_validate(room) if room is not None else None,
        payment_status=status,
        last_payment=PaymentOut.model_validate(last_payment) if last_payment is not None else None,
    )


@store_operation
def get_tenant_with_details(
    db: Session, tenant_id: int, today: Optional[date] = None
) -> Optional[TenantDetailsOut]:
    row = _details_query(db).filter(Tenant.id == tenant_id).first()
    if row is None:
        return None
    tenant, house, room = row
    status = payment_status.tenant_status(db, tenant, today)
    last_payment = payment_crud.latest_by_tenant(db, [tenant.id]).get(tenant.id)
    return _to_details(tenant, house, room, status, last_payment)


@store_operation
def get_all_with_payment_status(db: Session, today: Optional[date] = None) -> List[TenantDetailsOut]:
    rows = _newest_first(_details_query(db)).all()
    tenants = [tenant for tenant, _, _ in rows]
    statuses = payment_status.statuses_for(db, tenants, today)
    latest = payment_crud.latest_by_tenant(db, [t.id for t in tenants])
    logger.debug("Computed payment status for %s tenants", len(tenants))
    return [
        _to_details(tenant, house, room, statuses[tenant.id], latest.get(tenant.id))
        for tenant, house, room in rows
    ]
