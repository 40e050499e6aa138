from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from tourpro.schemas import ApiResponse, CamelModel

class SiteSettingsBase(CamelModel):
    """Site-wide configuration shown to customers and used by the admin panel"""
    site_name: str = Field(..., min_length=1, max_length=255)
    site_tagline: Optional[str] = Field(None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    currency: str = Field(..., min_length=3, max_length=3)
    currency_symbol: str = Field(..., max_length=5)
    timezone: str
    booking_policy: Optional[str] = None
    cancellation_policy: Optional[str] = None
    max_bookings_per_user: int = Field(..., ge=1)
    maintenance_mode: bool
    email_notifications: bool
    sms_notifications: bool
    primary_color: Optional[str] = Field(None, max_length=20)
    accent_color: Optional[str] = Field(None, max_length=20)

class SiteSettings(SiteSettingsBase):
    id: int
    created_at: datetime
    updated_at: datetime

class SiteSettingsUpdate(CamelModel):
    site_name: Optional[str] = Field(None, min_length=1, max_length=255)
    site_tagline: Optional[str] = Field(None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    currency_symbol: Optional[str] = Field(None, max_length=5)
    timezone: Optional[str] = None
    booking_policy: Optional[str] = None
    cancellation_policy: Optional[str] = None
    max_bookings_per_user: Optional[int] = Field(None, ge=1)
    maintenance_mode: Optional[bool] = None
    email_notifications: Optional[bool] = None
    sms_notifications: Optional[bool] = None
    primary_color: Optional[str] = Field(None, max_length=20)
    accent_color: Optional[str] = Field(None, max_length=20)

class SiteSettingsResponse(ApiResponse):
    data: SiteSettings
