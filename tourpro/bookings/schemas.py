from pydantic import BaseModel, EmailStr, Field, validator
from typing import List, Optional, Dict, Any
from datetime import datetime, date

from tourpro.enums import BookingStatus, PaymentStatus, PaymentMethod
from tourpro.schemas import ApiResponse, CamelModel, Money, Pagination
from tourpro.tours.schemas import TourSummary

class ContactInfo(CamelModel):
    """Contact details captured when the booking is made"""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)

# Booking Request Models
class BookingCreate(CamelModel):
    """Request to book a tour"""
    tour_id: int
    travel_date: date
    adults: int
    children: Optional[int] = 0
    payment_method: PaymentMethod = PaymentMethod.ONLINE
    special_requests: Optional[str] = Field(None, max_length=500)
    contact_info: Optional[ContactInfo] = None

    @validator("adults")
    def validate_adults(cls, v):
        if v < 1:
            raise ValueError("At least one adult is required")
        return v

    @validator("children")
    def validate_children(cls, v):
        if v is None:
            return 0
        if v < 0:
            raise ValueError("Children cannot be negative")
        return v

class BookingUpdate(CamelModel):
    """Admin patch; tour, user, counts, amount and reference are not editable"""
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    payment_method: Optional[PaymentMethod] = None
    travel_date: Optional[date] = None
    special_requests: Optional[str] = Field(None, max_length=500)
    contact_info: Optional[ContactInfo] = None

class PaymentRequest(CamelModel):
    """Simulated payment; payment_data is accepted but never inspected"""
    method: Optional[PaymentMethod] = None
    payment_data: Optional[Dict[str, Any]] = None

class BookingSearchFilters(BaseModel):
    """Filters for listing bookings"""
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None

# Booking Response Models
class BookingUser(CamelModel):
    id: int
    name: str
    email: str

class Booking(CamelModel):
    """Booking details as returned to clients"""
    id: int
    tour: Optional[TourSummary] = None
    user: Optional[BookingUser] = None
    booking_date: datetime
    travel_date: date
    adults: int
    children: int
    total_amount: Money
    status: BookingStatus
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    special_requests: Optional[str] = None
    contact_info: ContactInfo
    booking_ref: str
    created_at: datetime
    updated_at: datetime

class BookingResponse(ApiResponse):
    data: Booking

class BookingListResponse(ApiResponse):
    data: List[Booking]
    pagination: Pagination
