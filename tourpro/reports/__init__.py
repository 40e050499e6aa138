"""
Reporting Module

Derives booking and revenue statistics from the booking ledger: totals,
paid revenue, recent activity for a trailing window, a per-status breakdown,
the last twelve months of bookings and revenue, and the five most booked
tours. Every report is recomputed from the database on request.
"""

from .router import router
from .report_service import ReportService
from .schemas import ReportSnapshot

__all__ = ["router", "ReportService", "ReportSnapshot"]
