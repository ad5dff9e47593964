from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from rentbook.api.deps import get_db
from rentbook.crud import payment as payment_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.schemas.payment import PaymentOut, TotalPaidOut
from rentbook.schemas.tenant import (
    OverduePaymentOut,
    TenantCreate,
    TenantDetailsOut,
    TenantUpdate,
    TenantWithRoomCreate,
)
from rentbook.services.dashboard import get_overdue_payments

router = APIRouter(prefix="/tenants", tags=["tenants"])


def matches_search(tenant: TenantDetailsOut, search: Optional[str]) -> bool:
    """Full name or email (case-insensitive), or phone substring."""
    if not search or not search.strip():
        return True
    needle = search.strip().lower()
    full_name = f"{tenant.first_name} {tenant.last_name}".lower()
    return (
        needle in full_name
        or needle in tenant.phone
        or (tenant.email is not None and needle in tenant.email.lower())
    )


@router.get("", response_model=List[TenantDetailsOut])
def list_tenants(
    db: Session = Depends(get_db),
    search: Optional[str] = Query(None, description="search by name/phone/email"),
):
    """
    All tenants with house, room, last payment and payment_status
    (up_to_date | overdue for the current month).
    """
    tenants = tenant_crud.get_all_with_payment_status(db)
    return [t for t in tenants if matches_search(t, search)]


@router.get("/overdue", response_model=List[OverduePaymentOut])
def list_overdue(db: Session = Depends(get_db)):
    return get_overdue_payments(db)


@router.get("/{tenant_id}", response_model=TenantDetailsOut)
def get_tenant(tenant_id: int, db: Session = Depends(get_db)):
    tenant = tenant_crud.get_tenant_with_details(db, tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.get("/{tenant_id}/payments", response_model=List[PaymentOut])
def list_tenant_payments(tenant_id: int, db: Session = Depends(get_db)):
    return payment_crud.get_by_tenant_id(db, tenant_id)


@router.get("/{tenant_id}/total-paid", response_model=TotalPaidOut)
def tenant_total_paid(tenant_id: int, db: Session = Depends(get_db)):
    return TotalPaidOut(tenant_id=tenant_id, total_paid=payment_crud.get_total_paid(db, tenant_id))


@router.post("", response_model=TenantDetailsOut, status_code=201)
def create_tenant(payload: TenantCreate, db: Session = Depends(get_db)):
    """
    Create a tenant in an existing room. 400 if the room is not in house_id.
    """
    tenant_id = tenant_crud.create(db, payload)
    return tenant_crud.get_tenant_with_details(db, tenant_id)


@router.post("/with-room", response_model=TenantDetailsOut, status_code=201)
def create_tenant_with_room(payload: TenantWithRoomCreate, db: Session = Depends(get_db)):
    """
    Create the room and the tenant together (single transaction).

    **Example:**
    ```
    POST /tenants/with-room
    {
        "house_id": 1,
        "room_name": "101",
        "room_type": "Studio",
        "first_name": "Jean",
        "last_name": "Dupont",
        "phone": "+225 07 00 00 00",
        "rent_amount": 50000
    }
    ```
    """
    tenant_id, _ = tenant_crud.create_with_room(db, payload)
    return tenant_crud.get_tenant_with_details(db, tenant_id)


@router.patch("/{tenant_id}", response_model=TenantDetailsOut)
def update_tenant(tenant_id: int, payload: TenantUpdate, db: Session = Depends(get_db)):
    tenant_crud.update(db, tenant_id, payload)
    tenant = tenant_crud.get_tenant_with_details(db, tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.delete("/{tenant_id}", status_code=204)
def delete_tenant(tenant_id: int, db: Session = Depends(get_db)):
    tenant_crud.delete(db, tenant_id)
    return None
