"""FastAPI application factory. No business logic; only wiring and exception handlers."""

from fastapi import FastAPI
from sqlalchemy import Engine

from maintenance.api import router
from maintenance.core.config import Settings, get_settings
from maintenance.core.database import build_engine, build_session_factory
from maintenance.core.responses import register_exception_handlers


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the application around one engine.

    The engine (built from settings when not given) is the only state shared
    between requests; each request gets its own session from it.
    """
    settings = settings or get_settings()
    engine = engine or build_engine(settings)

    app = FastAPI(
        title="Maintenance Master API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)
    app.include_router(router)
    return app
