"""FastAPI application for the Dream Stay booking API.

This package provides REST endpoints for:
- Health checks
- Rooms (listing, price filter, availability override)
- Bookings (create, list, reschedule, cancel)
- Reviews
- Identity token cookie (/jwt, /logout)

The storage handle is connected once in the lifespan handler and every
service is built around it, so tests can pass in their own handle.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from dreamstay import __version__
from dreamstay.api.dependencies import build_services
from dreamstay.api.exceptions import register_exception_handlers
from dreamstay.api.middleware import CORRELATION_ID_HEADER, CorrelationIdMiddleware
from dreamstay.api.routes import (
    auth_router,
    bookings_router,
    health_router,
    reviews_router,
    rooms_router,
)
from dreamstay.config import Settings, load_settings
from dreamstay.services import DynamoDBService
from dreamstay.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    db: DynamoDBService | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Runtime settings; read from the environment when omitted
        db: Connected storage handle; when omitted one is connected on
            startup and closed on shutdown
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = db is None
        handle = DynamoDBService.from_settings(settings).connect() if owned else db

        app.state.settings = settings
        build_services(app.state, handle, settings)
        logger.info(
            "Dream Stay API started (environment=%s, tables=%s-*)",
            settings.environment,
            settings.table_prefix,
        )
        try:
            yield
        finally:
            if owned:
                handle.close()

    app = FastAPI(
        title="Dream Stay API",
        description="REST API for room listings, bookings and reviews",
        version=__version__,
        lifespan=lifespan,
    )

    # Credentials (the token cookie) require explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(rooms_router)
    app.include_router(bookings_router)
    app.include_router(reviews_router)
    app.include_router(auth_router)

    return app


load_dotenv()
configure_logging(logging.INFO)

app = create_app()

# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="auto")


def run_server(host: str = "0.0.0.0", port: int | None = None, reload: bool = False) -> None:
    """Run the API locally with uvicorn.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: PORT from the environment, 5000)
        reload: Enable hot reload for development (default: False)
    """
    import uvicorn

    port = port or load_settings().port

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("dreamstay.api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
