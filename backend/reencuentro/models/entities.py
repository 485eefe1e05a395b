from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class SeatEntity:
    table: int
    seat_no: int
    angle: float

    @property
    def id(self) -> str:
        return seat_id(self.table, self.seat_no)


@dataclass(frozen=True)
class TableEntity:
    table: int
    x: float
    y: float

    @property
    def label(self) -> str:
        return f"M{self.table}"


def seat_id(table: int, seat_no: int) -> str:
    return f"M{table}-A{seat_no}"


class Screen(str, Enum):
    ACCESS = "access"
    SEATS = "seats"
    FORM = "form"
    CONFIRMATION = "confirmation"


@dataclass
class ParticipantForm:
    nombres: str = ""
    apellidos: str = ""
    dni: str = ""
    celular: str = ""
    email: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.nombres} {self.apellidos}"


PARTICIPANT_FIELDS = ("nombres", "apellidos", "dni", "celular", "email")


@dataclass(frozen=True)
class TicketEntity:
    name: str
    dni: str
    seat_id: str
    event: str
    email: str

    @property
    def table_label(self) -> str:
        return self.seat_id.split("-")[0]

    @property
    def seat_label(self) -> str:
        return self.seat_id.split("-")[1]


# One variant per screen; the selected seat only exists where it is meaningful.

@dataclass(frozen=True)
class AccessView:
    screen = Screen.ACCESS


@dataclass(frozen=True)
class SeatsView:
    selected_seat: str | None = None
    screen = Screen.SEATS


@dataclass(frozen=True)
class FormView:
    selected_seat: str
    screen = Screen.FORM


@dataclass(frozen=True)
class ConfirmationView:
    ticket: TicketEntity
    screen = Screen.CONFIRMATION


ScreenView = Union[AccessView, SeatsView, FormView, ConfirmationView]


@dataclass
class SessionEntity:
    view: ScreenView = field(default_factory=AccessView)
    access_code: str = ""
    form: ParticipantForm = field(default_factory=ParticipantForm)
    last_error: str | None = None

    @property
    def screen(self) -> Screen:
        return self.view.screen

    @property
    def selected_seat(self) -> str | None:
        if isinstance(self.view, (SeatsView, FormView)):
            return self.view.selected_seat
        if isinstance(self.view, ConfirmationView):
            return self.view.ticket.seat_id
        return None
