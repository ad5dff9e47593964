from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from rentbook.api.deps import get_db
from rentbook.core.errors import DuplicatePaymentError
from rentbook.crud import payment as payment_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.schemas.common import require_month
from rentbook.schemas.payment import PaymentCreate, PaymentOut, PaymentUpdate, PaymentWithTenantOut

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[PaymentWithTenantOut])
def list_payments(
    db: Session = Depends(get_db),
    tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
    month: Optional[str] = Query(None, description="YYYY-MM"),
):
    if month:
        try:
            month = require_month(month)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    if tenant_id is not None:
        payments = payment_crud.get_by_tenant_id(db, tenant_id)
        if month:
            payments = [p for p in payments if p.month == month]
    elif month:
        payments = payment_crud.get_by_month(db, month)
    else:
        payments = payment_crud.get_all(db)
    return payment_crud.with_tenants(db, payments)


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: int, db: Session = Depends(get_db)):
    payment = payment_crud.get_by_id(db, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.post("", response_model=PaymentOut, status_code=201)
def create_payment(payload: PaymentCreate, db: Session = Depends(get_db)):
    """
    Record a rent payment for one tenant and one month.

    **Validation:**
    - the tenant must exist (404)
    - the month must not already be paid (409); the store itself allows duplicates
    """
    if tenant_crud.get_by_id(db, payload.tenant_id) is None:
        raise HTTPException(status_code=404, detail="Tenant not found")

    if payment_crud.is_month_paid(db, payload.tenant_id, payload.month):
        raise DuplicatePaymentError(
            f"Tenant {payload.tenant_id} already has a payment for {payload.month}"
        )

    payment_id = payment_crud.create(db, payload)
    return payment_crud.get_by_id(db, payment_id)


@router.patch("/{payment_id}", response_model=PaymentOut)
def update_payment(payment_id: int, payload: PaymentUpdate, db: Session = Depends(get_db)):
    payment_crud.update(db, payment_id, payload)
    payment = payment_crud.get_by_id(db, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.delete("/{payment_id}", status_code=204)
def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    payment_crud.delete(db, payment_id)
    return None
