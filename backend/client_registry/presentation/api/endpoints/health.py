"""Health check endpoint: no database access, always available."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
