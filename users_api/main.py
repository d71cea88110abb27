"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → contract-shaped JSON responses
    - Store initialized on startup via lifespan context manager
    - Startup logs a human-readable ready message with the listen URL

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - run() wraps uvicorn so `users-api` and `python -m users_api.main` behave the same
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.json_store import init_store
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(
        settings.users_file,
        autocreate=settings.users_file_autocreate,
        serialize_writes=settings.users_serialize_writes,
    )
    logger.info(f"Server is running on http://localhost:{settings.port}")
    yield
    logger.info("Users API shutting down")


app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app on the configured host and port."""
    settings = get_settings()
    # log_config=None: the lifespan owns logging setup
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
