import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from rentbook.core.errors import StoreFault
from rentbook.crud import tenant as tenant_crud
from rentbook.crud.base import apply_partial_update, delete_row, notify, store_operation
from rentbook.models.house import House
from rentbook.schemas.house import HouseCreate, HouseOut, HouseStatsOut, HouseUpdate
from rentbook.schemas.tenant import PaymentStatus
from rentbook.services import payment_status

logger = logging.getLogger(__name__)


@store_operation
def get_all(db: Session) -> List[House]:
    houses = db.query(House).order_by(House.created_at.desc(), House.id.desc()).all()
    logger.debug("Found %s houses", len(houses))
    return houses


@store_operation
def get_by_id(db: Session, house_id: int) -> Optional[House]:
    return db.query(House).filter(House.id == house_id).first()


@store_operation
def create(db: Session, payload: HouseCreate) -> int:
    house = House(**payload.model_dump())
    db.add(house)
    db.commit()
    notify("house", "created", house.id)
    return house.id


@store_operation
def update(db: Session, house_id: int, payload: HouseUpdate) -> int:
    count = apply_partial_update(db, House, house_id, payload.model_dump(exclude_unset=True))
    if count:
        notify("house", "updated", house_id)
    return count


@store_operation
def delete(db: Session, house_id: int) -> None:
    """
    Delete the house row only. Its rooms and tenants are left in place
    (no cascade); tenant details then report no house.
    """
    if delete_row(db, House, house_id):
        notify("house", "deleted", house_id)


def _house_stats(db: Session, base: dict, today: Optional[date]) -> HouseStatsOut:
    tenants = tenant_crud.get_by_house_id(db, base["id"])
    statuses = payment_status.statuses_for(db, tenants, today)
    return HouseStatsOut(
        **base,
        tenant_count=len(tenants),
        total_rent=sum((Decimal(t.rent_amount) for t in tenants), Decimal("0")),
        overdue_count=sum(1 for s in statuses.values() if s == PaymentStatus.OVERDUE),
    )


@store_operation
def get_all_with_stats(db: Session, today: Optional[date] = None) -> List[HouseStatsOut]:
    """
    Every house with tenant_count, total_rent and overdue_count.

    A house whose stats can't be read comes back with zeros and
    stats_degraded=True; the other houses are unaffected.
    """
    result: List[HouseStatsOut] = []
    for house in get_all(db):
        # read the house columns up front; a failed stats query rolls back and expires `house`
        base = HouseOut.model_validate(house).model_dump()
        try:
            result.append(_house_stats(db, base, today))
        except StoreFault:
            logger.warning("Stats unavailable for house %s, reporting zeros", base["id"])
            result.append(HouseStatsOut(**base, stats_degraded=True))
    return result
