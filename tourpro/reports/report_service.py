from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func, desc, extract
from sqlalchemy.orm import Session

from tourpro.models import Booking, Tour
from tourpro.enums import BookingStatus, PaymentStatus, UserRole
from tourpro.auth.service import UserService
from tourpro.tours.service import TourService
from tourpro.reports.schemas import (
    ReportOverview, StatusBreakdown, MonthlyRevenue, TopTour, ReportSnapshot
)

MONTHS_IN_TREND = 12
TOP_TOURS_LIMIT = 5

def _amount(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")

class ReportService:
    """Read-only aggregates over the booking ledger. Nothing is cached."""

    def __init__(self, db: Session):
        self.db = db

    def get_report(self, period_days: int = 30, now: Optional[datetime] = None) -> ReportSnapshot:
        """Build a report; only recent_bookings depends on period_days"""
        now = now or datetime.utcnow()
        since = now - timedelta(days=period_days)

        overview = ReportOverview(
            total_bookings=self._count(),
            confirmed_bookings=self._count(Booking.status == BookingStatus.CONFIRMED.value),
            total_revenue=self._paid_revenue(),
            recent_bookings=self._count(Booking.created_at >= since),
            total_tours=TourService.count_active(self.db),
            total_users=UserService.count_users(self.db, UserRole.USER),
            period_days=period_days
        )

        return ReportSnapshot(
            overview=overview,
            bookings_by_status=self._bookings_by_status(),
            revenue_by_month=self._revenue_by_month(),
            top_tours=self._top_tours()
        )

    def _count(self, *criteria) -> int:
        return self.db.query(func.count(Booking.id)).filter(*criteria).scalar() or 0

    def _paid_revenue(self) -> Decimal:
        total = self.db.query(func.sum(Booking.total_amount)).filter(
            Booking.payment_status == PaymentStatus.PAID.value
        ).scalar()
        return _amount(total)

    def _bookings_by_status(self) -> List[StatusBreakdown]:
        rows = self.db.query(
            Booking.status,
            func.count(Booking.id),
            func.sum(Booking.total_amount)
        ).group_by(Booking.status).all()

        return [
            StatusBreakdown(status=status, count=count, revenue=_amount(revenue))
            for status, count, revenue in rows
        ]

    def _revenue_by_month(self) -> List[MonthlyRevenue]:
        year = extract("year", Booking.created_at)
        month = extract("month", Booking.created_at)

        rows = self.db.query(
            year.label("year"),
            month.label("month"),
            func.count(Booking.id),
            func.sum(Booking.total_amount)
        ).group_by(year, month)\
         .order_by(desc(year), desc(month))\
         .limit(MONTHS_IN_TREND).all()

        # Most recent months were selected; present them oldest first
        return [
            MonthlyRevenue(year=int(y), month=int(m), bookings=count, revenue=_amount(revenue))
            for y, m, count, revenue in reversed(rows)
        ]

    def _top_tours(self) -> List[TopTour]:
        booking_count = func.count(Booking.id)

        rows = self.db.query(
            Tour.id,
            Tour.title,
            Tour.destination,
            booking_count,
            func.sum(Booking.total_amount)
        ).join(Booking, Booking.tour_id == Tour.id)\
         .group_by(Tour.id, Tour.title, Tour.destination)\
         .order_by(desc(booking_count))\
         .limit(TOP_TOURS_LIMIT).all()

        return [
            TopTour(tour_id=tour_id, title=title, destination=destination, count=count, revenue=_amount(revenue))
            for tour_id, title, destination, count, revenue in rows
        ]
