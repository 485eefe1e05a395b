from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Mapping

from ..core.config import Settings, settings as default_settings
from ..core.store import ReservationStore
from ..models.entities import (
    PARTICIPANT_FIELDS,
    AccessView,
    ConfirmationView,
    FormView,
    Screen,
    SeatsView,
    SessionEntity,
    TicketEntity,
)
from .layout_service import LayoutService
from .validation import ErrorKind, FieldRule, validate_access_code, validate_participant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of one event. ``accepted`` is False both for rejections and ignored events."""

    accepted: bool
    screen: Screen
    kind: ErrorKind | None = None
    rule: FieldRule | None = None
    message: str | None = None

    @property
    def rejected(self) -> bool:
        return self.kind is not None


class SessionService:
    """
    Booking flow for the single active session: access -> seats -> form -> confirmation.

    Events that make no sense on the current screen, and clicks on occupied or
    unknown seats, are ignored without an error. Failed code or form
    submissions are reported through the returned result and ``last_error``.
    """

    def __init__(self, store: ReservationStore, settings: Settings | None = None) -> None:
        self.store = store
        self.settings = settings or default_settings
        self.layout = LayoutService(self.settings)
        self._seat_map = self.layout.seat_map()
        self._seat_ids = {row["id"] for row in self._seat_map}
        self.session = SessionEntity()

    def _ignored(self) -> TransitionResult:
        return TransitionResult(accepted=False, screen=self.session.screen)

    def _moved(self) -> TransitionResult:
        self.session.last_error = None
        return TransitionResult(accepted=True, screen=self.session.screen)

    def edit_access_code(self, code: str) -> TransitionResult:
        if not isinstance(self.session.view, AccessView):
            return self._ignored()
        self.session.access_code = code
        return TransitionResult(accepted=True, screen=self.session.screen)

    def submit_access_code(self, code: str | None = None) -> TransitionResult:
        if not isinstance(self.session.view, AccessView):
            return self._ignored()
        if code is not None:
            self.session.access_code = code

        result = validate_access_code(self.session.access_code, self.settings.access_code_list())
        if not result.ok:
            logger.warning("Access code rejected")
            self.session.last_error = result.message
            return TransitionResult(
                accepted=False, screen=self.session.screen, kind=result.kind, message=result.message
            )

        self.session.view = SeatsView()
        logger.info("Access code accepted")
        return self._moved()

    def select_seat(self, seat_id: str) -> TransitionResult:
        view = self.session.view
        if not isinstance(view, SeatsView):
            return self._ignored()
        if seat_id not in self._seat_ids or self.store.is_occupied(seat_id):
            return self._ignored()

        self.session.view = replace(view, selected_seat=seat_id)
        return self._moved()

    def continue_to_form(self) -> TransitionResult:
        view = self.session.view
        if not isinstance(view, SeatsView) or view.selected_seat is None:
            return self._ignored()
        self.session.view = FormView(selected_seat=view.selected_seat)
        return self._moved()

    def back_to_seats(self) -> TransitionResult:
        view = self.session.view
        if not isinstance(view, FormView):
            return self._ignored()
        # the form draft stays as typed
        self.session.view = SeatsView(selected_seat=view.selected_seat)
        return self._moved()

    def edit_form(self, fields: Mapping[str, str | None]) -> TransitionResult:
        if not isinstance(self.session.view, FormView):
            return self._ignored()
        self._apply_fields(fields)
        return TransitionResult(accepted=True, screen=self.session.screen)

    def _apply_fields(self, fields: Mapping[str, str | None]) -> None:
        changes = {k: v for k, v in fields.items() if k in PARTICIPANT_FIELDS and v is not None}
        if changes:
            self.session.form = replace(self.session.form, **changes)

    def submit_form(self, fields: Mapping[str, str | None] | None = None) -> TransitionResult:
        view = self.session.view
        if not isinstance(view, FormView):
            return self._ignored()
        if fields:
            self._apply_fields(fields)

        form = self.session.form
        result = validate_participant(form)
        if not result.ok:
            logger.warning(f"Participant form rejected: {result.rule.value if result.rule else ''}")
            self.session.last_error = result.message
            return TransitionResult(
                accepted=False,
                screen=self.session.screen,
                kind=result.kind,
                rule=result.rule,
                message=result.message,
            )

        # occupancy was checked when the seat was selected, not again here
        self.store.reserve(view.selected_seat, form.full_name)
        ticket = TicketEntity(
            name=form.full_name,
            dni=form.dni,
            seat_id=view.selected_seat,
            event=self.settings.EVENT_LABEL,
            email=form.email,
        )
        self.session.view = ConfirmationView(ticket=ticket)
        logger.info(f"Seat {view.selected_seat} reserved")
        return self._moved()

    def new_reservation(self) -> TransitionResult:
        if not isinstance(self.session.view, ConfirmationView):
            return self._ignored()
        self.session = SessionEntity()
        return self._moved()

    @property
    def ticket(self) -> TicketEntity | None:
        view = self.session.view
        return view.ticket if isinstance(view, ConfirmationView) else None

    def seat_map(self) -> list[dict]:
        """Static seat map with occupancy and selection overlaid."""
        reserved = self.store.reservations()
        selected = self.session.selected_seat if isinstance(self.session.view, (SeatsView, FormView)) else None
        rows = []
        for row in self._seat_map:
            occupant = reserved.get(row["id"])
            rows.append(
                {
                    **row,
                    "occupied": occupant is not None,
                    "selected": row["id"] == selected,
                    "occupant_label": occupant.split(" ")[0] if occupant else None,
                }
            )
        return rows
