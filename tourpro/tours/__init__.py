"""
Tour Catalog Module

Persists sellable tour packages with per-person adult/child pricing and a
bookable status. The booking ledger resolves tours through
TourService.get_tour and checks TourService.is_bookable before pricing a
booking; the reporting module counts active tours.
"""

from .router import router
from .service import TourService

__all__ = ["router", "TourService"]
