from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from rentbook.core.config import settings

# sqlite connections are shared across the threadpool FastAPI runs sync routes in
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}
else:
    connect_args = {}

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def init_db(bind=None) -> None:
    """
    Create the four tables if they don't exist yet.
    Managed databases should go through alembic instead.
    """
    # Register every model on Base.metadata before create_all
    from rentbook.models import house, room, tenant, payment  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
