from sqlalchemy import Column, String, Integer
from rentbook.core.database import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)

    # Plain column, no FK constraint: deleting a house leaves its rooms behind
    house_id = Column(Integer, nullable=False, index=True)

    name = Column(String, nullable=False)  # "101", "Chambre 2", ...
    type = Column(String, nullable=False)  # free text: studio / chambre / appartement
