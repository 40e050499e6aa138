"""
Tests for the reporting aggregates and the admin-only reports endpoint.
"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from tourpro.models import Booking
from tourpro.enums import BookingStatus, PaymentStatus, TourStatus
from tourpro.reports.report_service import ReportService
from tourpro.bookings.booking_service import BookingService
from tourpro.bookings.schemas import BookingCreate

NOW = datetime(2025, 6, 15, 12, 0, 0)


@pytest.fixture
def add_booking(session, customer):
    """Insert a booking row directly so created_at can be pinned."""
    counter = {"n": 0}

    def _add_booking(tour, amount="1000", status=BookingStatus.PENDING,
                     payment_status=PaymentStatus.UNPAID, created_at=NOW):
        counter["n"] += 1
        booking = Booking(
            tour_id=tour.id,
            user_id=customer.id,
            travel_date=date(2025, 9, 1),
            adults=1,
            children=0,
            total_amount=Decimal(amount),
            status=status.value,
            payment_status=payment_status.value,
            booking_ref=f"BKTEST{counter['n']:04d}",
            created_at=created_at,
        )
        session.add(booking)
        session.commit()
        return booking

    return _add_booking


def test_empty_ledger(session, admin):
    report = ReportService(session).get_report(now=NOW)

    assert report.overview.total_bookings == 0
    assert report.overview.total_revenue == Decimal("0")
    assert report.bookings_by_status == []
    assert report.revenue_by_month == []
    assert report.top_tours == []


def test_paid_booking_counts_as_revenue(session, tour, customer):
    service = BookingService(session)
    booking = service.create_booking(
        BookingCreate(tour_id=tour.id, travel_date=date(2025, 9, 1), adults=2, children=1), customer
    )

    before = ReportService(session).get_report()
    service.pay_booking(booking.id, customer)
    after = ReportService(session).get_report()

    assert before.overview.total_revenue == Decimal("0")
    assert after.overview.total_revenue == Decimal("2500")
    assert after.overview.confirmed_bookings == 1
    assert after.overview.total_bookings == 1

    [top] = after.top_tours
    assert (top.tour_id, top.count, top.revenue) == (tour.id, 1, Decimal("2500"))
    [row] = after.bookings_by_status
    assert (row.status, row.count, row.revenue) == (BookingStatus.CONFIRMED, 1, Decimal("2500"))


def test_overview_counts(session, make_tour, customer, other_customer, add_booking):
    bali = make_tour()
    make_tour(title="Retired", status=TourStatus.INACTIVE)

    add_booking(bali, "1000", BookingStatus.CONFIRMED, PaymentStatus.PAID)
    add_booking(bali, "500", BookingStatus.CONFIRMED, PaymentStatus.PARTIAL)
    add_booking(bali, "700", BookingStatus.PENDING, PaymentStatus.UNPAID)
    add_booking(bali, "300", BookingStatus.CANCELLED, PaymentStatus.REFUNDED)

    overview = ReportService(session).get_report(now=NOW).overview

    assert overview.total_bookings == 4
    assert overview.confirmed_bookings == 2
    assert overview.total_revenue == Decimal("1000")
    assert overview.total_tours == 1
    assert overview.total_users == 2
    assert overview.period_days == 30


def test_period_only_affects_recent_bookings(session, tour, add_booking):
    add_booking(tour, "1000", payment_status=PaymentStatus.PAID, created_at=NOW - timedelta(days=5))
    add_booking(tour, "2000", payment_status=PaymentStatus.PAID, created_at=NOW - timedelta(days=60))

    last_week = ReportService(session).get_report(period_days=7, now=NOW).overview
    last_quarter = ReportService(session).get_report(period_days=90, now=NOW).overview

    assert last_week.recent_bookings == 1
    assert last_quarter.recent_bookings == 2
    assert last_week.total_revenue == last_quarter.total_revenue == Decimal("3000")
    assert last_week.total_bookings == last_quarter.total_bookings == 2


def test_bookings_by_status(session, tour, add_booking):
    add_booking(tour, "1000", BookingStatus.CONFIRMED)
    add_booking(tour, "1500", BookingStatus.CONFIRMED)
    add_booking(tour, "400", BookingStatus.CANCELLED)

    breakdown = {row.status: row for row in ReportService(session).get_report(now=NOW).bookings_by_status}

    assert set(breakdown) == {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    assert breakdown[BookingStatus.CONFIRMED].count == 2
    assert breakdown[BookingStatus.CONFIRMED].revenue == Decimal("2500")
    assert breakdown[BookingStatus.CANCELLED].revenue == Decimal("400")


def test_revenue_by_month_keeps_latest_twelve_oldest_first(session, tour, add_booking):
    # Fourteen consecutive months: Jan 2024 through Feb 2025
    for offset in range(14):
        year, month = 2024 + offset // 12, offset % 12 + 1
        add_booking(tour, "100", created_at=datetime(year, month, 10))
    add_booking(tour, "250", created_at=datetime(2025, 2, 20))

    months = ReportService(session).get_report(now=NOW).revenue_by_month

    assert len(months) == 12
    assert (months[0].year, months[0].month) == (2024, 3)
    assert (months[-1].year, months[-1].month) == (2025, 2)
    assert months[-1].bookings == 2
    assert months[-1].revenue == Decimal("350")


def test_top_tours(session, make_tour, add_booking):
    tours = [make_tour(title=f"Tour {i}") for i in range(7)]
    for index, tour in enumerate(tours):
        for _ in range(index + 1):
            add_booking(tour, "100")

    top = ReportService(session).get_report(now=NOW).top_tours

    assert [row.title for row in top] == ["Tour 6", "Tour 5", "Tour 4", "Tour 3", "Tour 2"]
    assert top[0].count == 7
    assert top[0].revenue == Decimal("700")
    assert top[0].tour_id == tours[6].id


def test_reports_endpoint(client, tour, add_booking, admin_headers):
    add_booking(tour, "1000", BookingStatus.CONFIRMED, PaymentStatus.PAID, created_at=datetime.utcnow())

    response = client.get("/api/reports", params={"period": 7}, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["overview"]["totalBookings"] == 1
    assert data["overview"]["recentBookings"] == 1
    assert data["overview"]["periodDays"] == 7
    assert data["overview"]["totalRevenue"] == 1000
    assert data["topTours"][0]["revenue"] == 1000
    assert data["bookingsByStatus"][0]["status"] == "Confirmed"
    assert data["topTours"][0]["tourId"] == tour.id
    assert set(data["revenueByMonth"][0]) == {"year", "month", "bookings", "revenue"}


def test_reports_are_admin_only(client, customer_headers):
    response = client.get("/api/reports", headers=customer_headers)

    assert response.status_code == 403
    assert response.json()["success"] is False


def test_reports_reject_invalid_period(client, admin_headers):
    response = client.get("/api/reports", params={"period": 0}, headers=admin_headers)

    assert response.status_code == 400
