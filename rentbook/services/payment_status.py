"""
Payment status per tenant.

A tenant is `overdue` when they moved in before the current month and no
payment is recorded for the current month; otherwise `up_to_date`. Tenants
whose entry month is the current month (or later) are never overdue, even
with no payments at all.

Only the current month is looked at: a tenant who skipped three months
shows one overdue month, for one rent_amount. Nothing is stored; the status
is recomputed on every read.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Optional

from sqlalchemy.orm import Session

from rentbook.crud import payment as payment_crud
from rentbook.models.tenant import Tenant
from rentbook.schemas.tenant import PaymentStatus


def month_key(d: date) -> str:
    """Calendar month of a date as "YYYY-MM"."""
    return f"{d.year:04d}-{d.month:02d}"


def current_month(today: Optional[date] = None) -> str:
    return month_key(today or date.today())


def is_new_tenant(entry_date: date, month: str) -> bool:
    # "YYYY-MM" strings compare in calendar order
    return month_key(entry_date) >= month


def classify(entry_date: date, month: str, month_paid: bool) -> PaymentStatus:
    if is_new_tenant(entry_date, month) or month_paid:
        return PaymentStatus.UP_TO_DATE
    return PaymentStatus.OVERDUE


def tenant_status(db: Session, tenant: Tenant, today: Optional[date] = None) -> PaymentStatus:
    month = current_month(today)
    if is_new_tenant(tenant.entry_date, month):
        return PaymentStatus.UP_TO_DATE
    if payment_crud.is_month_paid(db, tenant.id, month):
        return PaymentStatus.UP_TO_DATE
    return PaymentStatus.OVERDUE


def statuses_for(
    db: Session, tenants: Iterable[Tenant], today: Optional[date] = None
) -> Dict[int, PaymentStatus]:
    """
    Same result as tenant_status for each tenant, with a single payments
    query for all of them.
    """
    month = current_month(today)
    tenants = list(tenants)
    candidates = [t.id for t in tenants if not is_new_tenant(t.entry_date, month)]
    paid = payment_crud.paid_tenant_ids(db, month, candidates)
    return {t.id: classify(t.entry_date, month, t.id in paid) for t in tenants}


def overdue_amount(tenant, status) -> Decimal:
    """What the tenant owes for the current month: their rent if overdue, else nothing."""
    if status == PaymentStatus.OVERDUE:
        return Decimal(tenant.rent_amount)
    return Decimal("0")
