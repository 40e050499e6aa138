from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tourpro.database import get_db
from tourpro.models import User
from tourpro.auth.schemas import (
    UserCreate, UserUpdate, LoginRequest, ChangePasswordRequest, AuthResponse, UserResponse, TokenResponse
)
from tourpro.auth.service import UserService
from tourpro.auth.utils import create_access_token
from tourpro.auth.dependencies import get_current_user

router = APIRouter()

def _issue_token(user: User) -> str:
    return create_access_token(data={"sub": str(user.id), "role": user.role})

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new customer account"""
    db_user = UserService.create_user(db=db, user=user)
    return AuthResponse(
        message="Account created successfully!",
        token=_issue_token(db_user),
        user=db_user
    )

@router.post("/login", response_model=AuthResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    user = UserService.authenticate_user(db, login_data.email, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account deactivated. Contact admin."
        )

    return AuthResponse(message="Login successful!", token=_issue_token(user), user=user)

@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return {"data": current_user}

@router.put("/me", response_model=UserResponse)
def update_user_profile(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update current user profile"""
    updated_user = UserService.update_user(db=db, user_id=current_user.id, user_update=user_update)
    if not updated_user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return {"message": "Profile updated successfully!", "data": updated_user}

@router.put("/change-password", response_model=TokenResponse)
def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change the current user's password and issue a fresh token"""
    user = UserService.change_password(db, current_user, request.current_password, request.new_password)
    return TokenResponse(message="Password changed successfully!", token=_issue_token(user))
