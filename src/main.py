"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.simulation import router as simulation_router
from src.config import settings
from src.core.event_bus import EventBus, SimulationEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger, setup_logging
from src.core.meaning.engine import create_default_meaning_engine

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def _log_chronicle(event: SimulationEvent) -> None:
    logger.info(
        f"연대기 발행: turn={event.data['turn']} "
        f"types={','.join(event.data['meaning_types'])}"
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing meaning engine...")
    app.state.meaning_engine = create_default_meaning_engine()
    logger.info(f"Meaning engine initialized ({len(app.state.meaning_engine.plugins)} plugins).")

    event_bus = EventBus()
    event_bus.subscribe(EventTypes.CHRONICLE_EMITTED, _log_chronicle)
    app.state.event_bus = event_bus

    yield

    logger.info("Shutting down...")
    event_bus.clear()


app = FastAPI(title="Narrative World Core", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(simulation_router)
