"""
Booking Ledger Module

Owns the booking lifecycle for the tour platform:

- Booking creation with price computed from the tour's current adult/child prices
- Unique, human-readable booking references
- Role-scoped listing (customers see their own bookings, admins see all)
- Admin status and payment-status edits checked against the lifecycle tables
- Simulated payment that confirms and settles a booking in one update

Key Components:
- booking_service.py: BookingService and the scope_for visibility predicate
- lifecycle.py: allowed status and payment-status transitions
- router.py: FastAPI endpoints under /bookings
- schemas.py: Pydantic request/response models
"""

from .router import router
from .booking_service import BookingService, generate_booking_reference, scope_for
from .lifecycle import can_transition, can_transition_payment
from .schemas import (
    BookingCreate, BookingUpdate, PaymentRequest, BookingSearchFilters,
    Booking, BookingResponse, BookingListResponse, ContactInfo
)

__all__ = [
    "router",
    "BookingService",
    "generate_booking_reference",
    "scope_for",
    "can_transition",
    "can_transition_payment",
    "BookingCreate",
    "BookingUpdate",
    "PaymentRequest",
    "BookingSearchFilters",
    "Booking",
    "BookingResponse",
    "BookingListResponse",
    "ContactInfo"
]
