from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.app.core.config import Settings, get_settings
from backend.app.core.logging_config import configure_logging
from backend.app.db.session import build_engine, build_sessionmaker
from backend.app.db.store import SqlReservationStore
from backend.app.services.repository import ReservationRepository
from backend.app.services.reservations import ReservationService
from backend.app.services.validation import ReservationValidator
import backend.app.routers.health as health
import backend.app.routers.reservations as reservations


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API; run with ``uvicorn backend.app.main:create_app --factory``."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        engine = build_engine(settings)
        app.state.sessionmaker = build_sessionmaker(engine)
        app.state.reservation_service = ReservationService(
            validator=ReservationValidator(),
            repository=ReservationRepository(SqlReservationStore(app.state.sessionmaker)),
        )
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="Reservations API",
        lifespan=lifespan,
    )

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(reservations.router, prefix=settings.API_PREFIX)
    return app
