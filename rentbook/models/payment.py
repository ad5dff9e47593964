from sqlalchemy import Column, Integer, String, DateTime, Numeric, func
from rentbook.core.database import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)

    tenant_id = Column(Integer, nullable=False, index=True)

    # Month the payment covers, "YYYY-MM". One per tenant per month by convention only:
    # there is no unique constraint, callers check crud.payment.is_month_paid first.
    month = Column(String(7), nullable=False, index=True)

    amount = Column(Numeric(12, 2), nullable=False)

    # Set by the store at insert, never updated
    paid_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
