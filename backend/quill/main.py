"""
Quill Backend - FastAPI Application

Author registration and login plus a GraphQL endpoint over MongoDB,
with bearer-token checks on every mutation.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient

from quill.config import Settings, load_settings
from quill.container import build_services
from quill.core.errors import QuillError
from quill.database.connections import create_mongo_client, get_database
from quill.database.registry import create_indexes
from quill.routers import auth, health, query

logger = logging.getLogger(__name__)


async def handle_quill_error(request: Request, error: QuillError) -> JSONResponse:
    """Map the error taxonomy onto `{"message": ...}` responses."""
    if error.status_code >= 500:
        logger.error("%s on %s %s: %s", type(error).__name__, request.method, request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content={"message": error.message})


async def handle_request_validation_error(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    """Undecodable or mistyped request bodies are plain validation errors."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in error.errors()
    )
    return JSONResponse(status_code=400, content={"message": problems or "invalid request"})


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted
        mongo_client: Existing client to use (tests pass an in-memory one);
            when omitted a client is created on startup and closed on shutdown
    """
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Open the MongoDB client
        - Create indexes
        - Build the service container

        Shutdown:
        - Close the MongoDB client if it was opened here
        """
        logger.info("Starting up Quill Backend...")
        client = mongo_client or create_mongo_client(settings)
        database = get_database(client, settings)

        await create_indexes(database)
        app.state.services = build_services(settings, database)
        logger.info("Services ready (database %s)", settings.mongo_db_name)

        yield

        logger.info("Shutting down Quill Backend...")
        if mongo_client is None:
            client.close()

    app = FastAPI(
        title="Quill API",
        description="""
## Authors and articles over GraphQL

### Authentication
Register with `POST /register`, then obtain a token via `POST /login`.
Mutations require the token as a query parameter:
```
POST /graphql?token=your_jwt_token
```
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(QuillError, handle_quill_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(query.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Quill API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
