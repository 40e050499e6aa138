from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class TourStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SOLD_OUT = "Sold Out"
    COMING_SOON = "Coming Soon"


class TourDifficulty(str, Enum):
    EASY = "Easy"
    MODERATE = "Moderate"
    CHALLENGING = "Challenging"
    EXPERT = "Expert"


class TourCategory(str, Enum):
    ADVENTURE = "Adventure"
    BEACH = "Beach"
    CULTURAL = "Cultural"
    WILDLIFE = "Wildlife"
    MOUNTAIN = "Mountain"
    CITY = "City"
    CRUISE = "Cruise"
    HONEYMOON = "Honeymoon"


class BookingStatus(str, Enum):
    """Fulfilment state of a booking"""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class PaymentStatus(str, Enum):
    """Financial settlement state of a booking"""
    UNPAID = "Unpaid"
    PARTIAL = "Partial"
    PAID = "Paid"
    REFUNDED = "Refunded"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit Card"
    BANK_TRANSFER = "Bank Transfer"
    CASH = "Cash"
    ONLINE = "Online"
