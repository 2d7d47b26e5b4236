import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from typegen import __version__
from typegen.core.config import settings
from typegen.core.logging import configure_logging
from typegen.api.routes import router as api_router

configure_logging(settings.log_level)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    log.info("Starting API server (env=%s)", settings.app_env)
    yield
    log.info("Shutting down API server...")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    lifespan=lifespan
)
app.include_router(api_router, prefix="/v1")
