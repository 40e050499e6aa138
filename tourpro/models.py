from datetime import datetime
from sqlalchemy import (
    Column, Integer, BigInteger, String, Boolean, DateTime, Date, Text,
    ForeignKey, Numeric, CheckConstraint
)
from sqlalchemy.orm import relationship
from tourpro.database import Base
from tourpro.enums import (
    UserRole, TourStatus, TourDifficulty, BookingStatus, PaymentStatus, PaymentMethod
)

# SQLite only autoincrements INTEGER primary keys
PrimaryKey = BigInteger().with_variant(Integer, "sqlite")

# ================================
# Users
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(PrimaryKey, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(50))
    role = Column(String(20), nullable=False, default=UserRole.USER.value, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    bookings = relationship("Booking", back_populates="user")

# ================================
# Tours
# ================================
class Tour(Base):
    __tablename__ = "tours"

    id = Column(PrimaryKey, primary_key=True, index=True)
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    destination = Column(String(255), nullable=False, index=True)
    country = Column(String(100), nullable=False)
    duration_days = Column(Integer, nullable=False)
    duration_nights = Column(Integer, nullable=False, default=0)
    price_adult = Column(Numeric(10, 2), nullable=False)
    price_child = Column(Numeric(10, 2), nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="USD")
    max_group_size = Column(Integer, nullable=False)
    difficulty = Column(String(20), nullable=False, default=TourDifficulty.EASY.value)
    category = Column(String(20), nullable=False)
    available_slots = Column(Integer, nullable=False, default=0)
    featured = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default=TourStatus.ACTIVE.value, index=True)
    created_by = Column(PrimaryKey, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    bookings = relationship("Booking", back_populates="tour")
    creator = relationship("User")

    @property
    def price(self) -> dict:
        return {"adult": self.price_adult, "child": self.price_child, "currency": self.currency}

    @property
    def duration(self) -> dict:
        return {"days": self.duration_days, "nights": self.duration_nights}

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("adults >= 1", name="ck_bookings_adults"),
        CheckConstraint("children >= 0", name="ck_bookings_children"),
        CheckConstraint("total_amount >= 0", name="ck_bookings_total_amount"),
    )

    id = Column(PrimaryKey, primary_key=True, index=True)
    tour_id = Column(PrimaryKey, ForeignKey("tours.id"), nullable=False, index=True)
    user_id = Column(PrimaryKey, ForeignKey("users.id"), nullable=False, index=True)
    booking_date = Column(DateTime, default=datetime.utcnow)
    travel_date = Column(Date, nullable=False)
    adults = Column(Integer, nullable=False)
    children = Column(Integer, nullable=False, default=0)
    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value, index=True)
    payment_status = Column(String(20), nullable=False, default=PaymentStatus.UNPAID.value, index=True)
    payment_method = Column(String(20), nullable=False, default=PaymentMethod.ONLINE.value)
    special_requests = Column(String(500))
    contact_name = Column(String(255))
    contact_email = Column(String(255))
    contact_phone = Column(String(50))
    booking_ref = Column(String(32), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tour = relationship("Tour", back_populates="bookings")
    user = relationship("User", back_populates="bookings")

    @property
    def contact_info(self) -> dict:
        return {"name": self.contact_name, "email": self.contact_email, "phone": self.contact_phone}

# ================================
# Site Settings
# ================================
class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(PrimaryKey, primary_key=True, index=True)
    site_name = Column(String(255), nullable=False, default="TourPro Management System")
    site_tagline = Column(String(255), default="Discover the World with Us")
    contact_email = Column(String(255), default="admin@tourpro.com")
    contact_phone = Column(String(50), default="+1 (555) 123-4567")
    address = Column(String(500), default="123 Travel Street, New York, NY 10001")
    currency = Column(String(3), nullable=False, default="USD")
    currency_symbol = Column(String(5), nullable=False, default="$")
    timezone = Column(String(64), nullable=False, default="UTC")
    booking_policy = Column(Text, default="Cancellation allowed 48 hours before travel date.")
    cancellation_policy = Column(
        Text,
        default="Full refund if cancelled 7 days before. 50% refund if cancelled 3-7 days before."
    )
    max_bookings_per_user = Column(Integer, nullable=False, default=10)
    maintenance_mode = Column(Boolean, nullable=False, default=False)
    email_notifications = Column(Boolean, nullable=False, default=True)
    sms_notifications = Column(Boolean, nullable=False, default=False)
    primary_color = Column(String(20), default="#6366f1")
    accent_color = Column(String(20), default="#f59e0b")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
