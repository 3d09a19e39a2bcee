from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.v1 import health, media, messages
from .presentation.middleware import CorrelationIdMiddleware

configure_logging(settings.service_name, settings.log_level, settings.log_json)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting application",
        service=settings.service_name,
        max_upload_bytes=settings.max_upload_bytes,
    )
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="RCS Message Composer",
    description="Compose and validate rich messages before they are sent",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router)
app.include_router(messages.router, prefix="/api/v1")
app.include_router(media.router, prefix="/api/v1")


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
