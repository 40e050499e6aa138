from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from tourpro.config import settings
from tourpro.database import get_db
from tourpro.enums import BookingStatus, PaymentStatus
from tourpro.schemas import Pagination
from tourpro.auth.dependencies import get_current_user, require_admin
from tourpro.bookings.schemas import (
    BookingCreate, BookingUpdate, PaymentRequest, BookingSearchFilters,
    BookingResponse, BookingListResponse
)
from tourpro.bookings.booking_service import BookingService

router = APIRouter()

@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    request: BookingCreate,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Book a tour for the current user"""
    booking = BookingService(db).create_booking(request, current_user)
    return {"message": "Booking created successfully!", "data": booking}

@router.get("", response_model=BookingListResponse)
def list_bookings(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Bookings per page"),
    booking_status: Optional[BookingStatus] = Query(None, alias="status", description="Filter by booking status"),
    payment_status: Optional[PaymentStatus] = Query(None, alias="paymentStatus", description="Filter by payment status"),
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List bookings; customers only ever see their own"""
    filters = BookingSearchFilters(status=booking_status, payment_status=payment_status)
    bookings, total = BookingService(db).list_bookings(current_user, filters, page=page, limit=limit)
    return {"data": bookings, "pagination": Pagination.build(total, page, limit)}

@router.get("/reference/{booking_ref}", response_model=BookingResponse)
def get_booking_by_reference(
    booking_ref: str,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get booking by reference number"""
    return {"data": BookingService(db).get_booking_by_reference(booking_ref, current_user)}

@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get booking details by ID (owner or admin)"""
    return {"data": BookingService(db).get_booking(booking_id, current_user)}

@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    patch: BookingUpdate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Update booking status, payment status or details (admin)"""
    booking = BookingService(db).update_booking(booking_id, patch)
    return {"message": "Booking updated!", "data": booking}

@router.post("/{booking_id}/pay", response_model=BookingResponse)
def pay_booking(
    booking_id: int,
    payment: Optional[PaymentRequest] = None,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Simulated payment (owner or admin)"""
    booking = BookingService(db).pay_booking(booking_id, current_user, payment)
    return {"message": "Payment successful!", "data": booking}
