import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Set

from sqlalchemy import func
from sqlalchemy.orm import Session

from rentbook.crud.base import apply_partial_update, delete_row, notify, store_operation
from rentbook.models.payment import Payment
from rentbook.models.tenant import Tenant
from rentbook.schemas.payment import (
    PayerSummary,
    PaymentCreate,
    PaymentOut,
    PaymentUpdate,
    PaymentWithTenantOut,
)

logger = logging.getLogger(__name__)


def _newest_first(q):
    return q.order_by(Payment.paid_at.desc(), Payment.id.desc())


@store_operation
def get_all(db: Session) -> List[Payment]:
    return _newest_first(db.query(Payment)).all()


@store_operation
def get_by_id(db: Session, payment_id: int) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.id == payment_id).first()


@store_operation
def get_by_tenant_id(db: Session, tenant_id: int) -> List[Payment]:
    return _newest_first(db.query(Payment).filter(Payment.tenant_id == tenant_id)).all()


@store_operation
def get_by_month(db: Session, month: str) -> List[Payment]:
    return _newest_first(db.query(Payment).filter(Payment.month == month)).all()


@store_operation
def create(db: Session, payload: PaymentCreate) -> int:
    """
    Record a payment. The store accepts several payments for the same
    tenant and month; check is_month_paid first to avoid duplicates.
    """
    payment = Payment(**payload.model_dump())
    db.add(payment)
    db.commit()
    notify("payment", "created", payment.id)
    return payment.id


@store_operation
def update(db: Session, payment_id: int, payload: PaymentUpdate) -> int:
    count = apply_partial_update(db, Payment, payment_id, payload.model_dump(exclude_unset=True))
    if count:
        notify("payment", "updated", payment_id)
    return count


@store_operation
def delete(db: Session, payment_id: int) -> None:
    if delete_row(db, Payment, payment_id):
        notify("payment", "deleted", payment_id)


@store_operation
def get_total_paid(db: Session, tenant_id: int) -> Decimal:
    total = (
        db.query(func.coalesce(func.sum(Payment.amount), 0))
        .filter(Payment.tenant_id == tenant_id)
        .scalar()
    )
    return Decimal(str(total or 0))


@store_operation
def get_total_for_month(db: Session, month: str) -> Decimal:
    total = (
        db.query(func.coalesce(func.sum(Payment.amount), 0))
        .filter(Payment.month == month)
        .scalar()
    )
    return Decimal(str(total or 0))


@store_operation
def is_month_paid(db: Session, tenant_id: int, month: str) -> bool:
    count = (
        db.query(func.count(Payment.id))
        .filter(Payment.tenant_id == tenant_id, Payment.month == month)
        .scalar()
    )
    return (count or 0) > 0


@store_operation
def paid_tenant_ids(db: Session, month: str, tenant_ids: Iterable[int]) -> Set[int]:
    """Batch form of is_month_paid: which of `tenant_ids` have a payment for `month`."""
    ids = list(tenant_ids)
    if not ids:
        return set()
    rows = (
        db.query(Payment.tenant_id)
        .filter(Payment.month == month, Payment.tenant_id.in_(ids))
        .distinct()
        .all()
    )
    return {tenant_id for (tenant_id,) in rows}


@store_operation
def latest_by_tenant(db: Session, tenant_ids: Iterable[int]) -> Dict[int, Payment]:
    """Most recent payment per tenant, for tenants that have one."""
    ids = list(tenant_ids)
    if not ids:
        return {}
    latest: Dict[int, Payment] = {}
    for payment in _newest_first(db.query(Payment).filter(Payment.tenant_id.in_(ids))):
        latest.setdefault(payment.tenant_id, payment)
    return latest


@store_operation
def with_tenants(db: Session, payments: List[Payment]) -> List[PaymentWithTenantOut]:
    """Attach the paying tenant to each payment, with one tenants query for the whole list."""
    ids = {p.tenant_id for p in payments}
    tenants = {t.id: t for t in db.query(Tenant).filter(Tenant.id.in_(ids))} if ids else {}
    return [
        PaymentWithTenantOut(
            **PaymentOut.model_validate(p).model_dump(),
            tenant=PayerSummary.model_validate(tenants[p.tenant_id]) if p.tenant_id in tenants else None,
        )
        for p in payments
    ]
