from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..core.deps import get_booking
from ..models.schemas import AccessCodeIn, BookingOut, ParticipantIn, ParticipantOut, TicketOut
from ..services.session_service import SessionService, TransitionResult

router = APIRouter(prefix="/api/booking", tags=["booking"])


def _snapshot(booking: SessionService) -> BookingOut:
    s = booking.session
    ticket = booking.ticket
    return BookingOut(
        screen=s.screen.value,
        access_code=s.access_code,
        selected_seat=s.selected_seat,
        form=ParticipantOut.model_validate(s.form),
        last_error=s.last_error,
        ticket=TicketOut.model_validate(ticket) if ticket else None,
    )


def _respond(booking: SessionService, result: TransitionResult) -> BookingOut:
    # ignored events fall through with the unchanged snapshot
    if result.rejected:
        raise HTTPException(status_code=400, detail=result.message)
    return _snapshot(booking)


@router.get("", response_model=BookingOut)
def get_booking_state(booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _snapshot(booking)


@router.put("/access-code", response_model=BookingOut)
def edit_access_code(payload: AccessCodeIn, booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.edit_access_code(payload.code))


@router.post("/access", response_model=BookingOut)
def submit_access_code(
    payload: AccessCodeIn | None = None,
    booking: SessionService = Depends(get_booking),
) -> BookingOut:
    return _respond(booking, booking.submit_access_code(payload.code if payload else None))


@router.post("/seats/{seat_id}", response_model=BookingOut)
def select_seat(seat_id: str, booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.select_seat(seat_id))


@router.post("/continue", response_model=BookingOut)
def continue_to_form(booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.continue_to_form())


@router.post("/back", response_model=BookingOut)
def back_to_seats(booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.back_to_seats())


@router.put("/form", response_model=BookingOut)
def edit_form(payload: ParticipantIn, booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.edit_form(payload.model_dump(exclude_none=True)))


@router.post("/confirm", response_model=BookingOut)
def confirm(
    payload: ParticipantIn | None = None,
    booking: SessionService = Depends(get_booking),
) -> BookingOut:
    fields = payload.model_dump(exclude_none=True) if payload else None
    return _respond(booking, booking.submit_form(fields))


@router.post("/new", response_model=BookingOut)
def new_reservation(booking: SessionService = Depends(get_booking)) -> BookingOut:
    return _respond(booking, booking.new_reservation())
