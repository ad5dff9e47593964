from typing import List, Optional

from sqlalchemy.orm import Session

from rentbook.core.errors import RoomHouseMismatchError
from rentbook.crud.base import apply_partial_update, delete_row, notify, store_operation
from rentbook.models.room import Room
from rentbook.models.tenant import Tenant
from rentbook.schemas.room import RoomCreate, RoomUpdate


@store_operation
def get_all(db: Session) -> List[Room]:
    return db.query(Room).order_by(Room.id.desc()).all()


@store_operation
def get_by_id(db: Session, room_id: int) -> Optional[Room]:
    return db.query(Room).filter(Room.id == room_id).first()


@store_operation
def get_by_house_id(db: Session, house_id: int) -> List[Room]:
    return db.query(Room).filter(Room.house_id == house_id).order_by(Room.id.desc()).all()


@store_operation
def create(db: Session, payload: RoomCreate) -> int:
    room = Room(**payload.model_dump())
    db.add(room)
    db.commit()
    notify("room", "created", room.id)
    return room.id


@store_operation
def update(db: Session, room_id: int, payload: RoomUpdate) -> int:
    data = payload.model_dump(exclude_unset=True)
    if "house_id" in data:
        # tenants renting the room must stay in the room's house
        occupant = (
            db.query(Tenant)
            .filter(Tenant.room_id == room_id, Tenant.house_id != data["house_id"])
            .first()
        )
        if occupant is not None:
            raise RoomHouseMismatchError(
                f"Room {room_id} is rented by tenant {occupant.id} in house {occupant.house_id}"
            )

    count = apply_partial_update(db, Room, room_id, data)
    if count:
        notify("room", "updated", room_id)
    return count


@store_operation
def delete(db: Session, room_id: int) -> None:
    # Tenants still pointing at this room keep their room_id; their details show no room
    if delete_row(db, Room, room_id):
        notify("room", "deleted", room_id)
