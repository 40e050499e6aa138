from pydantic import Field, validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from tourpro.enums import TourStatus, TourCategory, TourDifficulty
from tourpro.schemas import ApiResponse, CamelModel, Money, Pagination

class TourPrice(CamelModel):
    adult: Money = Field(..., ge=0, decimal_places=2)
    child: Money = Field(Decimal("0"), ge=0, decimal_places=2)
    currency: str = Field("USD", min_length=3, max_length=3)

    @validator("currency")
    def upper_currency(cls, v):
        return v.upper()

class TourDuration(CamelModel):
    days: int = Field(..., ge=1)
    nights: int = Field(0, ge=0)

class TourBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=2000)
    destination: str = Field(..., min_length=1, max_length=255)
    country: str = Field(..., min_length=1, max_length=100)
    duration: TourDuration
    price: TourPrice
    max_group_size: int = Field(..., ge=1, le=500)
    difficulty: TourDifficulty = TourDifficulty.EASY
    category: TourCategory
    available_slots: int = Field(0, ge=0)
    featured: bool = False
    status: TourStatus = TourStatus.ACTIVE

class TourCreate(TourBase):
    pass

class TourUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    destination: Optional[str] = Field(None, min_length=1, max_length=255)
    country: Optional[str] = Field(None, min_length=1, max_length=100)
    duration: Optional[TourDuration] = None
    price: Optional[TourPrice] = None
    max_group_size: Optional[int] = Field(None, ge=1, le=500)
    difficulty: Optional[TourDifficulty] = None
    category: Optional[TourCategory] = None
    available_slots: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None
    status: Optional[TourStatus] = None

class Tour(TourBase):
    id: int
    created_by: int
    created_at: datetime
    updated_at: datetime

class TourSummary(CamelModel):
    """Tour fields embedded in a booking"""
    id: int
    title: str
    destination: str
    price: TourPrice

class TourSearch(CamelModel):
    status: Optional[TourStatus] = None
    category: Optional[TourCategory] = None
    destination: Optional[str] = None
    search: Optional[str] = None
    featured: Optional[bool] = None

class TourResponse(ApiResponse):
    data: Tour

class TourListResponse(ApiResponse):
    data: List[Tour]
    pagination: Pagination

class CategoryStats(CamelModel):
    """Tour count and adult price spread for one category"""
    category: TourCategory
    count: int
    avg_price: Money
    min_price: Money
    max_price: Money

class TourStatsResponse(ApiResponse):
    data: List[CategoryStats]
