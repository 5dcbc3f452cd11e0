"""
Application factory for the greeting API.

Run with uvicorn or another ASGI server::

    uvicorn greet_api.app:app --reload
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from greet_api import __version__
from greet_api.core.config import get_settings
from greet_api.core.logging_config import setup_logging
from greet_api.db.create_tables import create_all
from greet_api.domain.greeting import GreetingProvider
from greet_api.repositories.sql_repository import GreetingRepository
from greet_api.routers import greet as greet_router
from greet_api.services.greeting_service import GreetingService, InvalidFragmentError

access_logger = logging.getLogger("greet_api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path and response status."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        access_logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response


async def _invalid_fragment_handler(request: Request, exc: InvalidFragmentError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_all()
    yield


def create_app() -> FastAPI:
    """Build the FastAPI app with its greeting provider, repository and service."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Greet API", version=__version__, lifespan=lifespan)
    app.add_exception_handler(InvalidFragmentError, _invalid_fragment_handler)
    app.state.greeting_service = GreetingService(
        GreetingProvider(settings.app_greeting),
        GreetingRepository(),
    )
    app.add_middleware(AccessLogMiddleware)
    app.include_router(greet_router.router)

    logging.getLogger(__name__).info(
        "Greet API configured (env=%s, default greeting=%r)", settings.app_env, settings.app_greeting
    )
    return app


app = create_app()
