from decimal import Decimal

from pydantic import BaseModel


class DashboardSummaryOut(BaseModel):
    current_month: str
    house_count: int
    tenant_count: int
    total_monthly_rent: Decimal
    collected_this_month: Decimal  # payments recorded for current_month
    overdue_count: int
    overdue_amount: Decimal
