"""Main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from crc8_calculator import __version__
from crc8_calculator.api.dependencies import app_state
from crc8_calculator.api.routes import router as api_router
from crc8_calculator.core.config import Settings, setup_logging
from crc8_calculator.core.history import CalculationHistory, JsonFileHistoryStorage, MemoryHistoryStorage
from crc8_calculator.core.models import CRC8_MAXIM, HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    settings = app_state.settings or Settings()
    app_state.settings = settings

    setup_logging(settings.log_level)
    logger.info(
        "Starting CRC-8 Calculator v%s (%s, poly 0x%02X)", __version__, CRC8_MAXIM.name, CRC8_MAXIM.polynomial
    )

    if settings.persist_history:
        storage = JsonFileHistoryStorage(settings.history_file)
        logger.info("History stored in %s", settings.history_file)
    else:
        storage = MemoryHistoryStorage()

    app_state.history = CalculationHistory(storage, max_entries=settings.history_size)
    logger.info("Loaded %d history entries", app_state.history.count)

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="CRC-8 Calculator",
    description="CRC-8/MAXIM checksum calculator for hex and text input",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "CRC-8 Calculator",
        "version": __version__,
        "status": "running",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    history = app_state.history

    if history is None:
        return HealthResponse(status="unhealthy", history_entries=0)

    return HealthResponse(status="healthy", history_entries=history.count)


def main():
    """Run the application (for CLI entry point)."""
    import uvicorn

    settings = Settings()
    setup_logging(settings.log_level)
    app_state.settings = settings

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
