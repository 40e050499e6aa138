import logging
from decimal import Decimal
from sqlalchemy import func, case, or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional, Tuple
from tourpro.models import User, Booking, Tour
from tourpro.enums import UserRole, PaymentStatus
from tourpro.exceptions import InputValidationError, NotFoundError, InvalidStateError
from tourpro.auth.schemas import UserCreate, UserUpdate, AdminUserUpdate
from tourpro.auth.utils import get_password_hash, verify_password

logger = logging.getLogger(__name__)

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.lower().strip()).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        """Get user by ID or raise NotFoundError"""
        user = UserService.get_user_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found.")
        return user

    @staticmethod
    def get_users(
        db: Session,
        skip: int = 0,
        limit: int = 10,
        role: Optional[UserRole] = None,
        search: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> Tuple[List[User], int]:
        """Get accounts with optional filters, newest first"""
        query = db.query(User)

        if role:
            query = query.filter(User.role == role.value)
        if is_active is not None:
            query = query.filter(User.is_active == is_active)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(User.name.ilike(pattern), User.email.ilike(pattern)))

        total = query.count()
        users = query.order_by(User.created_at.desc(), User.id.desc()).offset(skip).limit(limit).all()
        return users, total

    @staticmethod
    def attach_payment_summaries(db: Session, users: List[User]) -> List[User]:
        """Set `payments` (booking count and paid total) on each user"""
        paid_amount = case(
            (Booking.payment_status == PaymentStatus.PAID.value, Booking.total_amount),
            else_=0
        )
        rows = db.query(
            Booking.user_id,
            func.count(Booking.id),
            func.sum(paid_amount)
        ).filter(Booking.user_id.in_([user.id for user in users]))\
         .group_by(Booking.user_id).all()

        summaries = {
            user_id: {"total_bookings": count, "total_paid": Decimal(str(paid or 0))}
            for user_id, count, paid in rows
        }
        for user in users:
            user.payments = summaries.get(user.id, {"total_bookings": 0, "total_paid": Decimal("0")})
        return users

    @staticmethod
    def create_user(db: Session, user: UserCreate, role: UserRole = UserRole.USER) -> User:
        """Create a new user with a hashed password"""
        if UserService.get_user_by_email(db, user.email):
            raise InputValidationError("Email already registered.")

        db_user = User(
            name=user.name,
            email=user.email,
            phone=user.phone,
            password=get_password_hash(user.password),
            role=role.value
        )

        try:
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
        except IntegrityError:
            db.rollback()
            raise InputValidationError("Email already registered.")

        logger.info(f"Registered {db_user.role} account {db_user.id} <{db_user.email}>")
        return db_user

    @staticmethod
    def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user

    @staticmethod
    def update_user(db: Session, user_id: int, user_update: UserUpdate) -> Optional[User]:
        """Update the profile fields of a user"""
        db_user = UserService.get_user_by_id(db, user_id)
        if not db_user:
            return None

        update_data = user_update.dict(exclude_unset=True)

        # Hash password if it's being updated
        if "password" in update_data:
            update_data["password"] = get_password_hash(update_data["password"])

        for field, value in update_data.items():
            setattr(db_user, field, value)

        db.commit()
        db.refresh(db_user)
        return db_user

    @staticmethod
    def change_password(db: Session, user: User, current_password: str, new_password: str) -> User:
        if not verify_password(current_password, user.password):
            raise InputValidationError("Current password is incorrect.")

        user.password = get_password_hash(new_password)
        db.commit()
        db.refresh(user)

        logger.info(f"User {user.id} changed their password")
        return user

    @staticmethod
    def admin_update_user(db: Session, user_id: int, user_update: AdminUserUpdate) -> User:
        """Apply an admin edit; the password is never touched here"""
        db_user = UserService.get_user(db, user_id)
        update_data = user_update.dict(exclude_unset=True)

        for field in ("name", "email", "role", "is_active"):
            if field in update_data and update_data[field] is None:
                raise InputValidationError(f"{field} cannot be empty.")

        email = update_data.get("email")
        if email and email != db_user.email and UserService.get_user_by_email(db, email):
            raise InputValidationError("Email already in use.")

        for field, value in update_data.items():
            setattr(db_user, field, value.value if hasattr(value, "value") else value)

        db.commit()
        db.refresh(db_user)

        logger.info(f"User {db_user.id} updated by admin: {', '.join(sorted(update_data)) or 'no changes'}")
        return db_user

    @staticmethod
    def delete_user(db: Session, user_id: int, requester_id: int) -> None:
        """Delete an account that owns no bookings or tours"""
        if user_id == requester_id:
            raise InputValidationError("You cannot delete your own account.")

        db_user = UserService.get_user(db, user_id)

        booking_count = db.query(func.count(Booking.id)).filter(Booking.user_id == user_id).scalar()
        tour_count = db.query(func.count(Tour.id)).filter(Tour.created_by == user_id).scalar()
        if booking_count or tour_count:
            raise InvalidStateError(
                f"User has {booking_count} booking(s) and {tour_count} tour(s) and cannot be deleted. "
                "Deactivate the account instead."
            )

        db.delete(db_user)
        db.commit()
        logger.info(f"User {user_id} deleted by admin {requester_id}")

    @staticmethod
    def toggle_status(db: Session, user_id: int, requester_id: int) -> User:
        """Flip an account between active and deactivated"""
        if user_id == requester_id:
            raise InputValidationError("You cannot deactivate your own account.")

        db_user = UserService.get_user(db, user_id)
        db_user.is_active = not db_user.is_active
        db.commit()
        db.refresh(db_user)

        logger.info(f"User {user_id} {'activated' if db_user.is_active else 'deactivated'} by admin {requester_id}")
        return db_user

    @staticmethod
    def is_admin(user: User) -> bool:
        return user.role == UserRole.ADMIN.value

    @staticmethod
    def count_users(db: Session, role: UserRole = UserRole.USER) -> int:
        """Count accounts holding `role`"""
        return db.query(func.count(User.id)).filter(User.role == role.value).scalar() or 0
