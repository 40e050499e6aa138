from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from tourpro.config import settings as app_settings
from tourpro.database import get_db
from tourpro.enums import UserRole
from tourpro.schemas import ApiResponse, Pagination
from tourpro.auth.dependencies import require_admin
from tourpro.auth.schemas import AdminUserCreate, AdminUserUpdate, AdminUserResponse, UserListResponse
from tourpro.auth.service import UserService
from tourpro.admin.schemas import SiteSettingsUpdate, SiteSettingsResponse
from tourpro.admin.settings_service import SiteSettingsService

router = APIRouter()

# ================================
# Site Settings
# ================================

@router.get("/settings", response_model=SiteSettingsResponse)
def get_settings(
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Get site settings"""
    return {"data": SiteSettingsService(db).get_settings()}

@router.put("/settings", response_model=SiteSettingsResponse)
def update_settings(
    update: SiteSettingsUpdate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Update site settings"""
    settings = SiteSettingsService(db).update_settings(update, updated_by_id=admin_user.id)
    return {"message": "Settings updated successfully!", "data": settings}

# ================================
# User Management
# ================================

@router.get("/users", response_model=UserListResponse)
def list_users(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(app_settings.DEFAULT_PAGE_SIZE, ge=1, le=app_settings.MAX_PAGE_SIZE, description="Users per page"),
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    search: Optional[str] = Query(None, description="Search name and email"),
    is_active: Optional[bool] = Query(None, alias="isActive", description="Filter by account status"),
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List accounts with their booking and payment totals"""
    users, total = UserService.get_users(
        db, skip=(page - 1) * limit, limit=limit, role=role, search=search, is_active=is_active
    )
    UserService.attach_payment_summaries(db, users)
    return {"data": users, "pagination": Pagination.build(total, page, limit)}

@router.get("/users/{user_id}", response_model=AdminUserResponse)
def get_user(
    user_id: int,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return {"data": UserService.get_user(db, user_id)}

@router.post("/users", response_model=AdminUserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user: AdminUserCreate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create an account with any role"""
    created = UserService.create_user(db, user, role=user.role)
    return {"message": "User created!", "data": created}

@router.put("/users/{user_id}", response_model=AdminUserResponse)
def update_user(
    user_id: int,
    user_update: AdminUserUpdate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Update profile, role or status of an account"""
    updated = UserService.admin_update_user(db, user_id, user_update)
    return {"message": "User updated!", "data": updated}

@router.delete("/users/{user_id}", response_model=ApiResponse)
def delete_user(
    user_id: int,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    UserService.delete_user(db, user_id, requester_id=admin_user.id)
    return {"message": "User deleted successfully."}

@router.patch("/users/{user_id}/toggle-status", response_model=AdminUserResponse)
def toggle_user_status(
    user_id: int,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Activate or deactivate an account"""
    user = UserService.toggle_status(db, user_id, requester_id=admin_user.id)
    return {"message": f"User {'activated' if user.is_active else 'deactivated'}!", "data": user}
