"""
PropDash application entry point
Hotel, restaurant and pool operations dashboard API
"""
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from propcore.validation import ValidationError
from propdash import __version__
from propdash.config import settings
from propdash.dependencies import get_dashboard
from propdash.domain import ALL_KINDS
from propdash.models.schemas import HealthResponse
from propdash.routers import dashboard, pool, restaurant, build_entity_router
from propdash.services.dashboard import Dashboard
from propdash.services.seed import seed_demo_data

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Apply LOG_LEVEL to the application loggers"""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    for name in ("propdash", "propcore"):
        logging.getLogger(name).setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    configure_logging(settings.LOG_LEVEL)

    app.state.dashboard = Dashboard(settings)
    if settings.SEED_DEMO_DATA:
        seed_demo_data(app.state.dashboard)

    logger.info(f"{settings.APP_NAME} started")
    yield
    logger.info(f"{settings.APP_NAME} stopped")


# Create the application
app = FastAPI(
    title="PropDash - property operations dashboard",
    description="Rooms, reservations, service requests, restaurant and pool management",
    version=__version__,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Rejected form -> 400 naming the first failing field"""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.to_dict()})


# Fixed paths first so they are not captured by /{entity_id}
app.include_router(restaurant.router)
app.include_router(pool.router)
app.include_router(dashboard.router)
for kind in ALL_KINDS:
    app.include_router(build_entity_router(kind))


@app.get("/")
def root():
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "modules": sorted({kind.module for kind in ALL_KINDS}),
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
def health(dashboard_: Dashboard = Depends(get_dashboard)):
    return HealthResponse(status="healthy", stores=dashboard_.store_sizes())


__all__ = ["app", "get_dashboard"]
