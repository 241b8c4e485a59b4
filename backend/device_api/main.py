import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .core.config import Settings
from .core.errors import DeviceApiError
from .core.logging import configure_logging
from .db.session import build_engine, check_connection, init_db
from .api import hello, devices

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application around one shared engine.

    The engine is created here once and handed to request handlers through
    ``app.state``; pass one in to serve from an existing pool.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)
    engine = engine or build_engine(settings.database_url)

    app = FastAPI(
        title="Device API", docs_url=None, redoc_url=None, openapi_url=None, redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    app.include_router(hello.router)
    app.include_router(devices.router)

    @app.exception_handler(DeviceApiError)
    def plain_text_error(request: Request, exc: DeviceApiError):
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.on_event("startup")
    def on_startup():
        if settings.DB_CHECK_ON_STARTUP:
            try:
                check_connection(engine)
            except SQLAlchemyError as exc:
                logger.critical("database unreachable at %s: %s", engine.url, exc)
                raise
            logger.info("connected to database at %s", engine.url)
        if settings.DB_INIT:
            init_db(engine)

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    return app
