from .booking import router as booking_router
from .venue import router as venue_router

__all__ = ["booking_router", "venue_router"]
