from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func
from rentbook.core.database import Base


class House(Base):
    __tablename__ = "houses"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    address = Column(String, nullable=False)

    # Set by the store at insert; newest houses are listed first
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
