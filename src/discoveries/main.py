import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from tortoise import Tortoise
from tortoise.contrib.fastapi import tortoise_exception_handlers

from .core import logging_config  # noqa: F401  configures the "discoveries" logger
from .core.config import DATABASE_URL
from .core.errors import FailedRequestError, failed_request_handler
from .features.auth.router import router as auth_router
from .features.location_reports.router import router as location_reports_router

logger = logging.getLogger("discoveries.main")  # This logger will inherit from 'discoveries'

MODEL_MODULES = [
    "discoveries.features.auth.models",
    "discoveries.features.agents.models",
    "discoveries.features.locations.models",
    "discoveries.features.location_reports.models",
    "aerich.models",  # For Aerich migrations
]

TORTOISE_ORM_CONFIG = {
    "connections": {"default": DATABASE_URL},
    "apps": {
        "models": {
            "models": MODEL_MODULES,
            "default_connection": "default",
        }
    },
    "use_tz": True,
    "timezone": "UTC",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events, such as connecting to the database.
    """
    logger.info("Starting application...")
    await Tortoise.init(config=TORTOISE_ORM_CONFIG)
    logger.info("Tortoise-ORM has been initialized.")

    yield

    await Tortoise.close_connections()
    logger.info("Tortoise-ORM connections have been closed.")


app = FastAPI(
    title="Agent Discoveries API",
    description="API for filing and searching location status reports.",
    version="0.1.0",
    exception_handlers={
        **tortoise_exception_handlers(),
        FailedRequestError: failed_request_handler,
    },
    lifespan=lifespan,
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Agent Discoveries API!"}


app.include_router(auth_router, prefix="/api/v1")
app.include_router(location_reports_router, prefix="/api/v1")
