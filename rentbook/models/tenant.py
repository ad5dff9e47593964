from sqlalchemy import Column, String, Integer, Date, Numeric
from rentbook.core.database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, index=True)

    # Referential columns (no FK constraint, no cascade).
    # room_id must point at a room of the same house_id; checked in crud.tenant
    house_id = Column(Integer, nullable=False, index=True)
    room_id = Column(Integer, nullable=False, index=True)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=True)

    entry_date = Column(Date, nullable=False, index=True)
    payment_frequency = Column(String, nullable=False, default="monthly")  # monthly/quarterly/semestrial/annual
    rent_amount = Column(Numeric(12, 2), nullable=False)  # monthly rent
