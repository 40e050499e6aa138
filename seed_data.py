#!/usr/bin/env python3
"""
Seed sample tours and bookings for TourPro.

Run seed_admin_data.py first: tours are created by the admin account and the
sample bookings belong to the demo customers.
"""

from datetime import date
from decimal import Decimal

from tourpro.database import SessionLocal, create_tables
from tourpro.logging_config import configure_logging
from tourpro.models import Booking, Tour
from tourpro.enums import BookingStatus, PaymentStatus, PaymentMethod
from tourpro.auth.service import UserService
from tourpro.tours.schemas import TourCreate
from tourpro.tours.service import TourService
from tourpro.bookings.schemas import BookingCreate, BookingUpdate
from tourpro.bookings.booking_service import BookingService

TOURS = [
    {
        "title": "Amazing Bali Getaway",
        "description": "Experience the magic of Bali with stunning temples, rice terraces, and pristine beaches.",
        "destination": "Bali", "country": "Indonesia",
        "duration": {"days": 7, "nights": 6},
        "price": {"adult": Decimal("1299"), "child": Decimal("799")},
        "max_group_size": 15, "difficulty": "Easy", "category": "Beach",
        "available_slots": 12, "featured": True,
    },
    {
        "title": "Swiss Alps Adventure",
        "description": "Conquer the majestic Swiss Alps with skiing, hiking, and breathtaking mountain scenery.",
        "destination": "Interlaken", "country": "Switzerland",
        "duration": {"days": 8, "nights": 7},
        "price": {"adult": Decimal("3499"), "child": Decimal("2200")},
        "max_group_size": 12, "difficulty": "Challenging", "category": "Mountain",
        "available_slots": 8, "featured": True,
    },
    {
        "title": "African Safari Experience",
        "description": "Witness the Great Migration and encounter the Big Five across the Serengeti.",
        "destination": "Serengeti", "country": "Tanzania",
        "duration": {"days": 10, "nights": 9},
        "price": {"adult": Decimal("4999"), "child": Decimal("3500")},
        "max_group_size": 8, "difficulty": "Moderate", "category": "Wildlife",
        "available_slots": 6, "featured": True,
    },
    {
        "title": "Kyoto Cultural Immersion",
        "description": "Ancient temples, zen gardens and tea ceremonies in Japan's cultural capital.",
        "destination": "Kyoto", "country": "Japan",
        "duration": {"days": 6, "nights": 5},
        "price": {"adult": Decimal("2299"), "child": Decimal("1500")},
        "max_group_size": 10, "difficulty": "Easy", "category": "Cultural",
        "available_slots": 9,
    },
    {
        "title": "New York City Explorer",
        "description": "From Times Square to Central Park, museums to Broadway shows.",
        "destination": "New York City", "country": "USA",
        "duration": {"days": 5, "nights": 4},
        "price": {"adult": Decimal("1899"), "child": Decimal("1200")},
        "max_group_size": 20, "difficulty": "Easy", "category": "City",
        "available_slots": 18, "status": "Sold Out",
    },
]

def create_seed_data():
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for TourPro...")

        admin = UserService.get_user_by_email(db, "admin@tourpro.com")
        john = UserService.get_user_by_email(db, "john@example.com")
        jane = UserService.get_user_by_email(db, "jane@example.com")
        if not (admin and john and jane):
            raise RuntimeError("Run seed_admin_data.py before seeding tours")

        # Clear existing data (in reverse dependency order)
        print("Clearing existing tours and bookings...")
        db.query(Booking).delete()
        db.query(Tour).delete()
        db.commit()

        print("Creating tours...")
        tours = [TourService.create_tour(db, TourCreate(**data), created_by_id=admin.id) for data in TOURS]

        print("Creating bookings...")
        bookings = BookingService(db)
        paid = bookings.create_booking(BookingCreate(
            tour_id=tours[0].id, travel_date=date(2025, 3, 15), adults=2, children=1,
            payment_method=PaymentMethod.CREDIT_CARD
        ), john)
        bookings.pay_booking(paid.id, john)

        bookings.create_booking(BookingCreate(
            tour_id=tours[1].id, travel_date=date(2025, 2, 20), adults=1,
            payment_method=PaymentMethod.BANK_TRANSFER
        ), jane)

        completed = bookings.create_booking(BookingCreate(
            tour_id=tours[2].id, travel_date=date(2025, 7, 1), adults=2,
            special_requests="Vegetarian meals please"
        ), jane)
        bookings.pay_booking(completed.id, admin)
        bookings.update_booking(completed.id, BookingUpdate(status=BookingStatus.COMPLETED))

        cancelled = bookings.create_booking(BookingCreate(
            tour_id=tours[3].id, travel_date=date(2025, 4, 1), adults=1, children=2
        ), john)
        bookings.update_booking(cancelled.id, BookingUpdate(status=BookingStatus.CANCELLED))

        partial = bookings.create_booking(BookingCreate(
            tour_id=tours[0].id, travel_date=date(2025, 4, 10), adults=3,
            payment_method=PaymentMethod.CASH
        ), jane)
        bookings.update_booking(partial.id, BookingUpdate(payment_status=PaymentStatus.PARTIAL))

        print(f"✅ Seed data created: {len(tours)} tours, 5 bookings")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    configure_logging()
    create_tables()
    create_seed_data()
