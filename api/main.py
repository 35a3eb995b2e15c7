"""
FastAPI application initialization and configuration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, settings
from core.integrations.stripe import StripeClient
from core.middleware import (
    ErrorHandlingMiddleware,
    StructuredLoggingMiddleware,
    setup_error_handlers,
    setup_logging,
)
from database.engine import close_db, create_db_engine, create_session_factory
from api.routes import health, preview
from api.routes.v1 import (
    admin,
    browse,
    companies,
    dashboard,
    jobs,
    payments,
    postings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store engine and payment client, release them on shutdown."""
    config: Settings = app.state.settings
    logger.info(f"Starting {config.app_name} in {config.app_env} environment")

    engine = create_db_engine(config)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.stripe_client = StripeClient.from_settings(config)
    if not app.state.stripe_client.configured:
        logger.warning("STRIPE_SECRET_KEY not set; paid plans cannot check out")

    yield

    logger.info(f"Shutting down {config.app_name}")
    await app.state.stripe_client.close()
    await close_db(engine)


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application. Middleware runs outermost-first in reverse order of adding."""
    app = FastAPI(
        title=config.app_name,
        description="Western Sydney job board API and link previews",
        version="0.1.0",
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = config

    setup_error_handlers(app, debug=config.debug)

    # 1. Error handling (innermost, right outside the routes)
    app.add_middleware(ErrorHandlingMiddleware, debug=config.debug)

    # 2. Structured logging
    app.add_middleware(
        StructuredLoggingMiddleware,
        log_request_body=config.log_request_body,
        max_body_size=config.log_max_body_size,
    )

    # 3. CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])

    for module in (jobs, companies, browse, postings, dashboard, admin, payments):
        app.include_router(module.router, prefix=config.api_v1_prefix)

    # Catch-all HTML route goes last
    app.include_router(preview.router)

    return app


setup_logging(log_level=settings.log_level, json_logs=settings.json_logs)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
