from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentbook.api.deps import get_db
from rentbook.core.events import changes
from rentbook.schemas.dashboard import DashboardSummaryOut
from rentbook.services.dashboard import get_summary

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummaryOut)
def dashboard(db: Session = Depends(get_db)):
    """
    For the home screen cards:
    - houses, tenants, total monthly rent
    - collected this month
    - overdue tenants and amount (current month only)
    """
    return get_summary(db)


@router.get("/changes/version")
def changes_version():
    """Bumped on every write; clients reload their lists when it moves."""
    return {"version": changes.version}
