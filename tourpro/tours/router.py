from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from tourpro.config import settings
from tourpro.database import get_db
from tourpro.enums import TourStatus, TourCategory
from tourpro.schemas import ApiResponse, Pagination
from tourpro.auth.dependencies import require_admin
from tourpro.tours.schemas import (
    TourCreate, TourUpdate, TourSearch, TourResponse, TourListResponse, TourStatsResponse
)
from tourpro.tours.service import TourService

router = APIRouter()

@router.get("", response_model=TourListResponse)
def get_tours(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Tours per page"),
    tour_status: Optional[TourStatus] = Query(None, alias="status", description="Filter by tour status"),
    category: Optional[TourCategory] = Query(None, description="Filter by category"),
    destination: Optional[str] = Query(None, description="Filter by destination"),
    search: Optional[str] = Query(None, description="Search title, destination, country and description"),
    featured: Optional[bool] = Query(None, description="Only featured tours"),
    db: Session = Depends(get_db)
):
    """List tours with filters and pagination"""
    filters = TourSearch(
        status=tour_status,
        category=category,
        destination=destination,
        search=search,
        featured=featured
    )
    tours, total = TourService.get_tours(db, skip=(page - 1) * limit, limit=limit, search=filters)
    return {"data": tours, "pagination": Pagination.build(total, page, limit)}

@router.get("/stats", response_model=TourStatsResponse)
def get_tour_stats(
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Tour count and adult price range per category (admin)"""
    return {"data": TourService.get_category_stats(db)}

@router.get("/{tour_id}", response_model=TourResponse)
def get_tour(tour_id: int, db: Session = Depends(get_db)):
    """Get tour details by ID"""
    return {"data": TourService.get_tour(db, tour_id)}

@router.post("", response_model=TourResponse, status_code=status.HTTP_201_CREATED)
def create_tour(
    tour: TourCreate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create a tour (admin)"""
    created = TourService.create_tour(db, tour, created_by_id=admin_user.id)
    return {"message": "Tour created successfully!", "data": created}

@router.put("/{tour_id}", response_model=TourResponse)
def update_tour(
    tour_id: int,
    tour_update: TourUpdate,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Update a tour (admin)"""
    updated = TourService.update_tour(db, tour_id, tour_update)
    return {"message": "Tour updated successfully!", "data": updated}

@router.delete("/{tour_id}", response_model=ApiResponse)
def delete_tour(
    tour_id: int,
    admin_user = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a tour without bookings (admin)"""
    TourService.delete_tour(db, tour_id)
    return {"message": "Tour deleted successfully!"}
