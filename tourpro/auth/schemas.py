from pydantic import BaseModel, EmailStr, Field, validator
from typing import List, Optional
from datetime import datetime
from tourpro.enums import UserRole
from tourpro.schemas import ApiResponse, CamelModel, Money, Pagination

class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=72)
    phone: Optional[str] = Field(None, max_length=50)

    @validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()

class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    password: Optional[str] = Field(None, min_length=6, max_length=72)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()

class UserOut(CamelModel):
    id: int
    name: str
    email: EmailStr
    phone: Optional[str] = None
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime

class UserResponse(ApiResponse):
    data: UserOut

class AuthResponse(ApiResponse):
    token: str
    token_type: str = "bearer"
    user: UserOut

class TokenResponse(ApiResponse):
    token: str
    token_type: str = "bearer"

class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=6, max_length=72)

# Admin user management
class AdminUserCreate(UserCreate):
    role: UserRole = UserRole.USER

class AdminUserUpdate(CamelModel):
    """Admin edit of an account; passwords are only changed by their owner"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None

    @validator("email")
    def normalize_email(cls, v):
        return v.lower().strip() if v else v

class UserPayments(CamelModel):
    total_bookings: int
    total_paid: Money

class AdminUserOut(UserOut):
    payments: Optional[UserPayments] = None

class AdminUserResponse(ApiResponse):
    data: UserOut

class UserListResponse(ApiResponse):
    data: List[AdminUserOut]
    pagination: Pagination
