import logging
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import func, or_, desc
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from tourpro.models import Tour, Booking
from tourpro.enums import TourStatus
from tourpro.exceptions import NotFoundError, InvalidStateError
from tourpro.tours.schemas import TourCreate, TourUpdate, TourSearch, CategoryStats

logger = logging.getLogger(__name__)

# Tours in these states cannot take new bookings
UNBOOKABLE_STATUSES = {TourStatus.INACTIVE.value, TourStatus.SOLD_OUT.value}

def _price(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

def _flatten(data: dict) -> dict:
    """Map nested price/duration payloads onto the flat tour columns"""
    price = data.pop("price", None)
    if price is not None:
        data["price_adult"] = price["adult"]
        data["price_child"] = price.get("child", 0)
        data["currency"] = price.get("currency", "USD")
    duration = data.pop("duration", None)
    if duration is not None:
        data["duration_days"] = duration["days"]
        data["duration_nights"] = duration.get("nights", 0)
    for key, value in data.items():
        if hasattr(value, "value"):
            data[key] = value.value
    return data

class TourService:
    @staticmethod
    def get_tour(db: Session, tour_id: int) -> Tour:
        """Get tour by ID or raise NotFoundError"""
        tour = db.query(Tour).filter(Tour.id == tour_id).first()
        if not tour:
            raise NotFoundError("Tour not found.")
        return tour

    @staticmethod
    def is_bookable(tour: Tour) -> bool:
        return tour.status not in UNBOOKABLE_STATUSES

    @staticmethod
    def get_tours(
        db: Session,
        skip: int = 0,
        limit: int = 10,
        search: Optional[TourSearch] = None
    ) -> Tuple[List[Tour], int]:
        """Get tours with optional search filters, newest first"""
        query = db.query(Tour)

        # Apply filters
        if search:
            if search.status:
                query = query.filter(Tour.status == search.status.value)

            if search.category:
                query = query.filter(Tour.category == search.category.value)

            if search.destination:
                query = query.filter(Tour.destination.ilike(f"%{search.destination}%"))

            if search.featured is not None:
                query = query.filter(Tour.featured == search.featured)

            if search.search:
                pattern = f"%{search.search}%"
                query = query.filter(or_(
                    Tour.title.ilike(pattern),
                    Tour.destination.ilike(pattern),
                    Tour.country.ilike(pattern),
                    Tour.description.ilike(pattern)
                ))

        total = query.count()
        tours = query.order_by(Tour.created_at.desc(), Tour.id.desc()).offset(skip).limit(limit).all()

        return tours, total

    @staticmethod
    def create_tour(db: Session, tour_data: TourCreate, created_by_id: int) -> Tour:
        """Create a new tour"""
        tour = Tour(created_by=created_by_id, **_flatten(tour_data.dict()))

        db.add(tour)
        db.commit()
        db.refresh(tour)

        logger.info(f"Tour {tour.id} '{tour.title}' created by user {created_by_id}")
        return tour

    @staticmethod
    def update_tour(db: Session, tour_id: int, tour_update: TourUpdate) -> Tour:
        """Update tour fields that were explicitly provided"""
        tour = TourService.get_tour(db, tour_id)

        for field, value in _flatten(tour_update.dict(exclude_unset=True)).items():
            setattr(tour, field, value)

        db.commit()
        db.refresh(tour)

        logger.info(f"Tour {tour.id} updated")
        return tour

    @staticmethod
    def delete_tour(db: Session, tour_id: int) -> None:
        """Delete a tour that has no bookings"""
        tour = TourService.get_tour(db, tour_id)

        booking_count = db.query(func.count(Booking.id)).filter(Booking.tour_id == tour_id).scalar()
        if booking_count:
            raise InvalidStateError(
                f"Tour has {booking_count} booking(s) and cannot be deleted. Set its status to Inactive instead."
            )

        db.delete(tour)
        db.commit()
        logger.info(f"Tour {tour_id} deleted")

    @staticmethod
    def get_category_stats(db: Session) -> List[CategoryStats]:
        """Per-category tour count with average, lowest and highest adult price"""
        tour_count = func.count(Tour.id)

        rows = db.query(
            Tour.category,
            tour_count,
            func.avg(Tour.price_adult),
            func.min(Tour.price_adult),
            func.max(Tour.price_adult)
        ).group_by(Tour.category)\
         .order_by(desc(tour_count), Tour.category).all()

        return [
            CategoryStats(
                category=category,
                count=count,
                avg_price=_price(avg_price),
                min_price=_price(min_price),
                max_price=_price(max_price)
            )
            for category, count, avg_price, min_price, max_price in rows
        ]

    @staticmethod
    def count_active(db: Session) -> int:
        return db.query(func.count(Tour.id)).filter(Tour.status == TourStatus.ACTIVE.value).scalar() or 0
