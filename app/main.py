# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Demo Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   python -m app
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings
from app.exceptions import DemoAppException, demo_app_exception_handler
from app.routers import fixture, health, users

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Only logs; the demo holds no connections or background tasks.
    """
    logger.info(f"Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {cors_allow_origins(settings)}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
## Demo Users API

A deliberately flawed two-endpoint service used as a target for code-review
and static-analysis tools. See `GET /api/fixture/findings` for the list of
planted problems.

```bash
curl http://localhost:8080/api/users/42
curl -X POST http://localhost:8080/api/users -d 'name=alice'
```
""",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "User lookup and creation",
        },
        {
            "name": "Fixture",
            "description": "Answer key for review tools",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

def cors_allow_origins(app_settings: Settings) -> list[str]:
    """Only production is restricted to the configured origins."""
    if app_settings.is_production:
        return app_settings.cors_origins_list
    return ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(settings),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(DemoAppException)
async def handle_demo_app_exception(request: Request, exc: DemoAppException):
    """Handle custom demo API exceptions."""
    return await demo_app_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    users.router,
    prefix="/api",
    tags=["Users"]
)

app.include_router(
    fixture.router,
    prefix="/api",
    tags=["Fixture"]
)

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Hand control to the ASGI server."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
