from typing import List
from tourpro.enums import BookingStatus
from tourpro.schemas import ApiResponse, CamelModel, Money

class ReportOverview(CamelModel):
    total_bookings: int
    confirmed_bookings: int
    total_revenue: Money
    recent_bookings: int
    total_tours: int
    total_users: int
    period_days: int

class StatusBreakdown(CamelModel):
    status: BookingStatus
    count: int
    revenue: Money

class MonthlyRevenue(CamelModel):
    year: int
    month: int
    bookings: int
    revenue: Money

class TopTour(CamelModel):
    tour_id: int
    title: str
    destination: str
    count: int
    revenue: Money

class ReportSnapshot(CamelModel):
    """Aggregates recomputed from the booking ledger on every request"""
    overview: ReportOverview
    bookings_by_status: List[StatusBreakdown]
    revenue_by_month: List[MonthlyRevenue]
    top_tours: List[TopTour]

class ReportResponse(ApiResponse):
    data: ReportSnapshot
