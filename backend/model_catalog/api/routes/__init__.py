"""API router aggregation."""

from fastapi import APIRouter

from model_catalog.api.routes import health, models

api_router = APIRouter()

# Health check routes (no auth required)
api_router.include_router(health.router, tags=["health"])

# Model catalog routes (public configuration data)
api_router.include_router(models.router, tags=["models"])
