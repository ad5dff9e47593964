from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from rentbook.api.deps import get_db
from rentbook.crud import house as house_crud
from rentbook.crud import room as room_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.schemas.house import HouseCreate, HouseOut, HouseStatsOut, HouseUpdate
from rentbook.schemas.room import RoomOut
from rentbook.schemas.tenant import TenantOut

router = APIRouter(prefix="/houses", tags=["houses"])


@router.get("", response_model=List[HouseOut])
def list_houses(db: Session = Depends(get_db)):
    return house_crud.get_all(db)


@router.get("/stats", response_model=List[HouseStatsOut])
def list_houses_with_stats(db: Session = Depends(get_db)):
    """
    Houses with tenant_count, total_rent and overdue_count (current month).
    A house flagged stats_degraded could not be counted and shows zeros.
    """
    return house_crud.get_all_with_stats(db)


@router.get("/{house_id}", response_model=HouseOut)
def get_house(house_id: int, db: Session = Depends(get_db)):
    house = house_crud.get_by_id(db, house_id)
    if not house:
        raise HTTPException(status_code=404, detail="House not found")
    return house


@router.get("/{house_id}/rooms", response_model=List[RoomOut])
def list_house_rooms(house_id: int, db: Session = Depends(get_db)):
    return room_crud.get_by_house_id(db, house_id)


@router.get("/{house_id}/tenants", response_model=List[TenantOut])
def list_house_tenants(house_id: int, db: Session = Depends(get_db)):
    return tenant_crud.get_by_house_id(db, house_id)


@router.post("", response_model=HouseOut, status_code=201)
def create_house(payload: HouseCreate, db: Session = Depends(get_db)):
    house_id = house_crud.create(db, payload)
    return house_crud.get_by_id(db, house_id)


@router.patch("/{house_id}", response_model=HouseOut)
def update_house(house_id: int, payload: HouseUpdate, db: Session = Depends(get_db)):
    house_crud.update(db, house_id, payload)
    house = house_crud.get_by_id(db, house_id)
    if not house:
        raise HTTPException(status_code=404, detail="House not found")
    return house


@router.delete("/{house_id}", status_code=204)
def delete_house(house_id: int, db: Session = Depends(get_db)):
    """
    Delete a house. Rooms and tenants of the house are NOT deleted.
    """
    house_crud.delete(db, house_id)
    return None
