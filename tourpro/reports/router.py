from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourpro.database import get_db
from tourpro.auth.dependencies import require_admin
from tourpro.reports.schemas import ReportResponse
from tourpro.reports.report_service import ReportService

router = APIRouter()

@router.get("", response_model=ReportResponse)
def get_reports(
    period: int = Query(30, ge=1, le=3650, description="Trailing window in days for recent bookings"),
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Booking and revenue statistics (admin)"""
    return {"data": ReportService(db).get_report(period_days=period)}
