# main.py
"""
FitFlow API - Main Application.

FastAPI app serving the workout and nutrition plan engine.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from settings import settings
from app.dependencies import get_plan_store
from app.services.plan_store import PlanStore
from app.utils.errors import FitFlowException

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

# Import routers
from app.routes import (
    workout,
    nutrition,
    meal_plan,
    shopping,
    plans,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting FitFlow API...")
    store = app.dependency_overrides.get(get_plan_store, get_plan_store)()
    if await store.healthcheck():
        logger.info("Plan store connected")
    else:
        logger.warning("Plan store unreachable - saved plans unavailable until Redis is up")

    yield

    await store.close()
    logger.info("FitFlow API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="FitFlow API",
    version="1.0.0",
    debug=settings.DEBUG,
    description="Personalized workout and nutrition plans from curated catalogs",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FitFlowException)
async def fitflow_exception_handler(request: Request, exc: FitFlowException):
    """Render application errors as JSON with their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "detail": exc.detail},
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint - fast response without Redis dependency."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0"
    }


@app.get("/health/redis")
async def redis_health_check(store: PlanStore = Depends(get_plan_store)):
    """Plan store connectivity check."""
    connected = await store.healthcheck()
    return {
        "status": "healthy" if connected else "unhealthy",
        "redis_connected": connected,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Include routers
app.include_router(workout.router, prefix="/workout", tags=["Workout"])
app.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
app.include_router(meal_plan.router, prefix="/meal-plan", tags=["Meal Plan"])
app.include_router(shopping.router, prefix="/shopping", tags=["Shopping"])
app.include_router(plans.router, prefix="/plans", tags=["Saved Plans"])


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "FitFlow API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
