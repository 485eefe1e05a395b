from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


ScreenName = Literal["access", "seats", "form", "confirmation"]


class AccessCodeIn(BaseModel):
    code: str


class ParticipantIn(BaseModel):
    """Participant fields; omitted fields keep their current value."""
    nombres: str | None = None
    apellidos: str | None = None
    dni: str | None = None
    celular: str | None = None
    email: str | None = None


class ParticipantOut(BaseModel):
    nombres: str
    apellidos: str
    dni: str
    celular: str
    email: str

    class Config:
        from_attributes = True


class TicketOut(BaseModel):
    name: str
    dni: str
    seat_id: str
    table_label: str
    seat_label: str
    event: str
    email: str

    class Config:
        from_attributes = True


class BookingOut(BaseModel):
    screen: ScreenName
    access_code: str
    selected_seat: str | None
    form: ParticipantOut
    last_error: str | None = None
    ticket: TicketOut | None = None


class SeatOut(BaseModel):
    id: str
    table: int
    seat_no: int
    angle: float
    x: float
    y: float
    occupied: bool
    selected: bool
    occupant_label: str | None = None  # first word of the occupant name


class TableOut(BaseModel):
    table: int
    label: str
    x: float
    y: float

    class Config:
        from_attributes = True


class StageOut(BaseModel):
    x: float
    y: float
    width: float
    height: float
    label: str


class VenueOut(BaseModel):
    width: int
    height: int
    table_radius: float
    seat_radius: float
    stage: StageOut
    tables: list[TableOut]
    seats: list[SeatOut]
