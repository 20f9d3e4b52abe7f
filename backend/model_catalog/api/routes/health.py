"""Health check endpoint."""

from fastapi import APIRouter

from model_catalog.core.config import settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check. No authentication, no collaborator calls."""
    return {"status": "ok", "project": settings.PROJECT_NAME}
