"""
FastAPI app entrypoint.

/location, /weather, /events, /movies: each answers from the database cache and
falls back to its provider on a miss. Unknown paths get a fixed plaintext reply.
"""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from city_explorer import __version__
from city_explorer.api.routes import events, location, movies, weather
from city_explorer.config import Settings, settings as default_settings
from city_explorer.core.errors import MSG_WRONG_PLACE, CityExplorerError, error_to_response
from city_explorer.db.session import create_engine, create_session_factory, create_tables
from city_explorer.services.providers import init_registry

logger = logging.getLogger(__name__)

# Dev origins; CORS_ORIGINS (comma-separated) adds production frontends.
_DEV_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]


def create_app(settings: Settings | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """
    Build the app. The engine and the provider HTTP client are owned by the lifespan
    and reached through app.state; transport lets tests serve provider traffic.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings)
        if settings.create_tables:
            await create_tables(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.http_client = httpx.AsyncClient(
            timeout=settings.provider_timeout_seconds,
            transport=transport,
        )
        init_registry(settings)
        logger.info("City Explorer ready on port %s", settings.port)
        try:
            yield
        finally:
            await app.state.http_client.aclose()
            await engine.dispose()

    app = FastAPI(title="City Explorer", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_DEV_CORS_ORIGINS + settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CityExplorerError)
    @app.exception_handler(Exception)
    async def handle_error(request: Request, exc: Exception):
        status_code, body = error_to_response(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        else:
            logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
        return PlainTextResponse(body, status_code=status_code)

    app.include_router(location.router, tags=["location"])
    app.include_router(weather.router, tags=["weather"])
    app.include_router(events.router, tags=["events"])
    app.include_router(movies.router, tags=["movies"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    # Registered last so every real route matches first.
    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    def wrong_place(path: str):
        return PlainTextResponse(MSG_WRONG_PLACE)

    return app


app = create_app()
