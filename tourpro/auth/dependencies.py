from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from tourpro.config import settings
from tourpro.database import get_db
from tourpro.auth.utils import verify_token
from tourpro.auth.service import UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)):
    """Get current authenticated user"""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided. Please login.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token.",
        headers={"WWW-Authenticate": "Bearer"},
    )

    # Verify token and get payload
    token_data = verify_token(token, credentials_exception)

    # Get user from database
    user = UserService.get_user_by_id(db, user_id=token_data["user_id"])
    if user is None:
        credentials_exception.detail = "Token is invalid. User not found."
        raise credentials_exception

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Your account has been deactivated. Contact admin.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user

def require_admin(current_user = Depends(get_current_user)):
    """Require admin role for access"""
    if not UserService.is_admin(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access denied. Role '{current_user.role}' is not authorized for this action."
        )
    return current_user
