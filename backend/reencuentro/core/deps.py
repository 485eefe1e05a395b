from __future__ import annotations

from fastapi import Request

from ..services.session_service import SessionService


def get_booking(request: Request) -> SessionService:
    # one session per application instance, created in create_app()
    return request.app.state.booking
