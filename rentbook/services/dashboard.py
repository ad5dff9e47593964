"""
Aggregates for the home screen and the payments screen: the overdue list
and the headline numbers.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from rentbook.crud import payment as payment_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.crud.base import store_operation
from rentbook.models.house import House
from rentbook.schemas.dashboard import DashboardSummaryOut
from rentbook.schemas.tenant import OverduePaymentOut, PaymentStatus
from rentbook.services.payment_status import current_month, overdue_amount

logger = logging.getLogger(__name__)


@store_operation
def get_overdue_payments(db: Session, today: Optional[date] = None) -> List[OverduePaymentOut]:
    """One entry per overdue tenant, for the current month and their monthly rent."""
    month = current_month(today)
    return [
        OverduePaymentOut(tenant=tenant, month=month, amount=overdue_amount(tenant, tenant.payment_status))
        for tenant in tenant_crud.get_all_with_payment_status(db, today)
        if tenant.payment_status == PaymentStatus.OVERDUE
    ]


@store_operation
def get_summary(db: Session, today: Optional[date] = None) -> DashboardSummaryOut:
    month = current_month(today)
    tenants = tenant_crud.get_all_with_payment_status(db, today)
    owed = [overdue_amount(t, t.payment_status) for t in tenants]

    summary = DashboardSummaryOut(
        current_month=month,
        house_count=db.query(func.count(House.id)).scalar() or 0,
        tenant_count=len(tenants),
        total_monthly_rent=sum((t.rent_amount for t in tenants), Decimal("0")),
        collected_this_month=payment_crud.get_total_for_month(db, month),
        overdue_count=sum(1 for t in tenants if t.payment_status == PaymentStatus.OVERDUE),
        overdue_amount=sum(owed, Decimal("0")),
    )
    logger.debug("Dashboard summary for %s: %s", month, summary)
    return summary
