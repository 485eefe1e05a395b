"""Venue layout: seat generation and table/seat placement on the venue canvas."""
from __future__ import annotations

import math

from ..core.config import Settings, settings as default_settings
from ..models.entities import SeatEntity, TableEntity


class LayoutService:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def generate_seats(self) -> list[SeatEntity]:
        """All seats, table-major then seat-minor. Same output on every call."""
        return [
            self._seat(table, seat_no)
            for table in range(1, self.settings.TABLE_COUNT + 1)
            for seat_no in range(1, self.settings.SEATS_PER_TABLE + 1)
        ]

    def _seat(self, table: int, seat_no: int) -> SeatEntity:
        return SeatEntity(table=table, seat_no=seat_no, angle=(seat_no - 1) * (360 / self.settings.SEATS_PER_TABLE))

    def table_position(self, table: int) -> tuple[float, float]:
        """
        Center of a table on the half-circle arrangement.

        Tables are placed by zero-based index, so table 1 sits at the start
        angle and the last table stops one step short of the end of the arc.

        Raises:
            ValueError: if the table number is outside 1..TABLE_COUNT
        """
        s = self.settings
        if not 1 <= table <= s.TABLE_COUNT:
            raise ValueError(f"Invalid table: {table}")

        angle = ((table - 1) / s.TABLE_COUNT) * s.ARRANGEMENT_ARC_DEGREES + s.ARRANGEMENT_START_DEGREES
        rad = math.radians(angle)
        return (
            s.ARRANGEMENT_CENTER_X + s.ARRANGEMENT_RADIUS * math.cos(rad),
            s.ARRANGEMENT_CENTER_Y + s.ARRANGEMENT_RADIUS * math.sin(rad),
        )

    def seat_position(self, angle: float, table_x: float, table_y: float) -> tuple[float, float]:
        """Seat center around its table; -90 degrees puts seat 1 at the top."""
        distance = self.settings.TABLE_RADIUS + self.settings.SEAT_OFFSET
        rad = math.radians(angle - 90)
        return (
            table_x + distance * math.cos(rad),
            table_y + distance * math.sin(rad),
        )

    def locate_seat(self, table: int, seat_no: int) -> tuple[float, float]:
        if not 1 <= seat_no <= self.settings.SEATS_PER_TABLE:
            raise ValueError(f"Invalid seat: {seat_no}")
        tx, ty = self.table_position(table)
        return self.seat_position(self._seat(table, seat_no).angle, tx, ty)

    def tables(self) -> list[TableEntity]:
        out = []
        for table in range(1, self.settings.TABLE_COUNT + 1):
            x, y = self.table_position(table)
            out.append(TableEntity(table=table, x=x, y=y))
        return out

    def seat_map(self) -> list[dict]:
        """Static seat map: every seat with its table center and its own coordinates."""
        centers = {t.table: t for t in self.tables()}
        rows = []
        for seat in self.generate_seats():
            t = centers[seat.table]
            x, y = self.seat_position(seat.angle, t.x, t.y)
            rows.append(
                {
                    "id": seat.id,
                    "table": seat.table,
                    "seat_no": seat.seat_no,
                    "angle": seat.angle,
                    "x": x,
                    "y": y,
                }
            )
        return rows
