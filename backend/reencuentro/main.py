from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api import booking_router, venue_router
from .core.config import Settings, settings as default_settings
from .core.store import InMemoryStore, ReservationStore
from .services.session_service import SessionService


def configure_logging() -> None:
    """Configure structured logging for the application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)


logger = logging.getLogger(__name__)
configure_logging()


def create_app(settings: Settings | None = None, store: ReservationStore | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Reencuentro Seating", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log incoming requests."""
        logger.info(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(f"Response: {request.method} {request.url.path} - Status: {response.status_code}")
        return response

    app.state.booking = SessionService(store=store if store is not None else InMemoryStore(), settings=settings)
    logger.info(
        f"Venue ready: {settings.TABLE_COUNT} tables x {settings.SEATS_PER_TABLE} seats for '{settings.EVENT_LABEL}'"
    )

    app.include_router(booking_router)
    app.include_router(venue_router)

    @app.get("/")
    def root():
        return {"ok": True, "service": "reencuentro-seating", "docs": "/docs"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
