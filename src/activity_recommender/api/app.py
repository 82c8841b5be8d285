"""FastAPI application factory.

## Usage

```python
from activity_recommender.api import create_app

app = create_app()

# Run with uvicorn
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
```

## Configuration

The app is configured via environment variables. See
`activity_recommender.config` for available settings.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from activity_recommender.config import get_settings
from activity_recommender.service import get_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Loads the activity catalog at startup so a broken catalog file fails
    fast instead of on the first request.
    """
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    catalog = get_catalog()
    logger.info(f"Serving {len(catalog)} activities")

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Weather-aware activity recommendations",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Include routers
    from activity_recommender.api.routes import activities, air_quality, recommendations

    app.include_router(activities.router, prefix="/api/activities", tags=["Activities"])
    app.include_router(
        recommendations.router, prefix="/api/recommendations", tags=["Recommendations"]
    )
    app.include_router(air_quality.router, prefix="/api/air-quality", tags=["Air Quality"])

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app
