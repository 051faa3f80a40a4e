import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from pocketbase_typegen import __version__
from pocketbase_typegen.core.config import settings
from pocketbase_typegen.core.logging import configure_logging
from pocketbase_typegen.api.routes import router as api_router

configure_logging(settings.log_level)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    log.info("Starting typegen API server...", extra={"source": "api", "stage": "-"})
    yield
    log.info("Shutting down typegen API server...", extra={"source": "api", "stage": "-"})


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    lifespan=lifespan
)
app.include_router(api_router, prefix="/v1")
