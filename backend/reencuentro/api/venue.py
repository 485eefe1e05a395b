from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.deps import get_booking
from ..models.schemas import SeatOut, StageOut, TableOut, VenueOut
from ..services.session_service import SessionService

router = APIRouter(prefix="/api/venue", tags=["venue"])


@router.get("", response_model=VenueOut)
def get_venue(booking: SessionService = Depends(get_booking)) -> VenueOut:
    s = booking.settings
    return VenueOut(
        width=s.CANVAS_WIDTH,
        height=s.CANVAS_HEIGHT,
        table_radius=s.TABLE_RADIUS,
        seat_radius=s.SEAT_RADIUS,
        stage=StageOut(
            x=s.STAGE_X,
            y=s.STAGE_Y,
            width=s.STAGE_WIDTH,
            height=s.STAGE_HEIGHT,
            label=s.STAGE_LABEL,
        ),
        tables=[TableOut.model_validate(t) for t in booking.layout.tables()],
        seats=[SeatOut(**row) for row in booking.seat_map()],
    )
