import logging
import secrets
import time
from typing import List, Optional, Tuple
from sqlalchemy import true
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from tourpro.models import Booking, User
from tourpro.enums import BookingStatus, PaymentStatus
from tourpro.exceptions import (
    InputValidationError, NotFoundError, InvalidStateError, ForbiddenError
)
from tourpro.auth.service import UserService
from tourpro.tours.service import TourService
from tourpro.bookings.schemas import (
    BookingCreate, BookingUpdate, PaymentRequest, BookingSearchFilters
)
from tourpro.bookings.lifecycle import can_transition, can_transition_payment

logger = logging.getLogger(__name__)

BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

def _to_base36(number: int) -> str:
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36[remainder])
    return "".join(reversed(digits)) or "0"

def generate_booking_reference() -> str:
    """Human-readable reference: BK + base-36 epoch millis + 6 random base-36 chars.

    Uniqueness is ultimately enforced by the unique index on bookings.booking_ref.
    """
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(secrets.choice(BASE36) for _ in range(6))
    return f"BK{timestamp}{suffix}"

def scope_for(requester: User) -> list:
    """Visibility predicate: admins see every booking, others only their own"""
    if UserService.is_admin(requester):
        return [true()]
    return [Booking.user_id == requester.id]

class BookingService:
    """Service for the booking ledger"""

    def __init__(self, db: Session):
        self.db = db

    def create_booking(self, request: BookingCreate, requester: User) -> Booking:
        """Price and persist a new booking against the tour's current price"""

        tour = TourService.get_tour(self.db, request.tour_id)
        if not TourService.is_bookable(tour):
            logger.warning(f"Rejected booking for tour {tour.id} in status {tour.status}")
            raise InvalidStateError("Tour is not available for booking.")

        children = request.children or 0
        total_amount = tour.price_adult * request.adults + tour.price_child * children

        contact = request.contact_info
        booking = Booking(
            tour_id=tour.id,
            user_id=requester.id,
            travel_date=request.travel_date,
            adults=request.adults,
            children=children,
            total_amount=total_amount,
            status=BookingStatus.PENDING.value,
            payment_status=PaymentStatus.UNPAID.value,
            payment_method=request.payment_method.value,
            special_requests=request.special_requests,
            contact_name=contact.name if contact else requester.name,
            contact_email=contact.email if contact else requester.email,
            contact_phone=contact.phone if contact else requester.phone,
            booking_ref=generate_booking_reference()
        )

        try:
            self.db.add(booking)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise InputValidationError(f"Booking could not be saved: {e.orig}")

        self.db.refresh(booking)
        logger.info(
            f"Booking {booking.booking_ref} created for tour {tour.id} by user {requester.id}: "
            f"{booking.adults} adult(s), {booking.children} child(ren), total {booking.total_amount}"
        )
        return booking

    def list_bookings(
        self,
        requester: User,
        filters: Optional[BookingSearchFilters] = None,
        page: int = 1,
        limit: int = 10
    ) -> Tuple[List[Booking], int]:
        """List bookings visible to the requester, newest first"""

        criteria = scope_for(requester)
        if filters:
            if filters.status:
                criteria.append(Booking.status == filters.status.value)
            if filters.payment_status:
                criteria.append(Booking.payment_status == filters.payment_status.value)

        query = self.db.query(Booking).filter(*criteria)
        total = query.count()
        bookings = (
            query.options(joinedload(Booking.tour), joinedload(Booking.user))
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return bookings, total

    def get_booking(self, booking_id: int, requester: User) -> Booking:
        """Get a booking the requester may see.

        Non-admins get ForbiddenError for both missing and foreign bookings so
        that ids owned by other users cannot be discovered.
        """
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        return self._authorize(booking, requester, "Not authorized to view this booking.")

    def get_booking_by_reference(self, booking_ref: str, requester: User) -> Booking:
        """Get booking by reference number"""
        booking = self.db.query(Booking).filter(Booking.booking_ref == booking_ref.upper()).first()
        return self._authorize(booking, requester, "Not authorized to view this booking.")

    def update_booking(self, booking_id: int, patch: BookingUpdate) -> Booking:
        """Apply an admin patch after checking status transitions"""

        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            raise NotFoundError("Booking not found.")

        update_data = patch.dict(exclude_unset=True)

        # Validate the whole patch before touching the record
        for field in ("status", "payment_status", "payment_method", "travel_date"):
            if field in update_data and update_data[field] is None:
                raise InputValidationError(f"{field} cannot be empty.")

        new_status = update_data.get("status")
        if new_status and not can_transition(booking.status, new_status):
            raise InvalidStateError(
                f"Cannot change booking status from {booking.status} to {new_status.value}."
            )

        new_payment_status = update_data.get("payment_status")
        if new_payment_status and not can_transition_payment(booking.payment_status, new_payment_status):
            raise InvalidStateError(
                f"Cannot change payment status from {booking.payment_status} to {new_payment_status.value}."
            )

        contact = update_data.pop("contact_info", None)
        if contact is not None:
            booking.contact_name = contact.get("name")
            booking.contact_email = contact.get("email")
            booking.contact_phone = contact.get("phone")

        for field, value in update_data.items():
            setattr(booking, field, value.value if hasattr(value, "value") else value)

        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Booking {booking.booking_ref} updated: status={booking.status}, payment={booking.payment_status}")
        return booking

    def pay_booking(self, booking_id: int, requester: User, payment: Optional[PaymentRequest] = None) -> Booking:
        """Simulated payment: marks the booking Paid and Confirmed in one update"""

        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        booking = self._authorize(booking, requester, "Not authorized to pay for this booking.")

        # Settled bookings that are already past confirmation stay as they are
        if booking.payment_status == PaymentStatus.PAID.value and not can_transition(booking.status, BookingStatus.CONFIRMED):
            logger.info(f"Booking {booking.booking_ref} is already paid ({booking.status}); nothing to collect")
            return booking

        if not can_transition(booking.status, BookingStatus.CONFIRMED):
            raise InvalidStateError(f"Booking is {booking.status} and cannot be paid.")
        if not can_transition_payment(booking.payment_status, PaymentStatus.PAID):
            raise InvalidStateError(f"Payment is {booking.payment_status} and cannot be collected again.")

        values = {
            Booking.payment_status: PaymentStatus.PAID.value,
            Booking.status: BookingStatus.CONFIRMED.value,
        }
        if payment and payment.method:
            values[Booking.payment_method] = payment.method.value

        self.db.query(Booking).filter(Booking.id == booking.id).update(values, synchronize_session=False)
        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Booking {booking.booking_ref} paid by user {requester.id} via {booking.payment_method}")
        return booking

    def _authorize(self, booking: Optional[Booking], requester: User, message: str) -> Booking:
        if UserService.is_admin(requester):
            if not booking:
                raise NotFoundError("Booking not found.")
            return booking

        if not booking or booking.user_id != requester.id:
            logger.warning(f"User {requester.id} denied access to booking {booking.id if booking else 'unknown'}")
            raise ForbiddenError(message)
        return booking
