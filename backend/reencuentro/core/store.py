from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Protocol


class ReservationStore(Protocol):
    """Seat occupancy, keyed by seat id. A key is present only once the seat is booked."""

    def is_occupied(self, seat_id: str) -> bool: ...

    def reserve(self, seat_id: str, occupant: str) -> None: ...

    def occupant_of(self, seat_id: str) -> str | None: ...

    def reservations(self) -> Dict[str, str]: ...


@dataclass
class InMemoryStore:
    seats: Dict[str, str] = field(default_factory=dict)  # key = seat id, value = occupant name

    def is_occupied(self, seat_id: str) -> bool:
        return seat_id in self.seats

    def reserve(self, seat_id: str, occupant: str) -> None:
        # no re-check here: occupancy is only guarded when the seat is selected
        self.seats[seat_id] = occupant

    def occupant_of(self, seat_id: str) -> str | None:
        return self.seats.get(seat_id)

    def reservations(self) -> Dict[str, str]:
        return dict(self.seats)
