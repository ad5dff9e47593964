from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from rentbook.api.deps import get_db
from rentbook.crud import room as room_crud
from rentbook.schemas.room import RoomCreate, RoomOut, RoomUpdate

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=List[RoomOut])
def list_rooms(
    db: Session = Depends(get_db),
    house_id: Optional[int] = Query(None, description="Filter by house ID"),
):
    if house_id is not None:
        return room_crud.get_by_house_id(db, house_id)
    return room_crud.get_all(db)


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: int, db: Session = Depends(get_db)):
    room = room_crud.get_by_id(db, room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.post("", response_model=RoomOut, status_code=201)
def create_room(payload: RoomCreate, db: Session = Depends(get_db)):
    room_id = room_crud.create(db, payload)
    return room_crud.get_by_id(db, room_id)


@router.patch("/{room_id}", response_model=RoomOut)
def update_room(room_id: int, payload: RoomUpdate, db: Session = Depends(get_db)):
    room_crud.update(db, room_id, payload)
    room = room_crud.get_by_id(db, room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.delete("/{room_id}", status_code=204)
def delete_room(room_id: int, db: Session = Depends(get_db)):
    room_crud.delete(db, room_id)
    return None
