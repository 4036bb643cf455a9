"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready always returns 200: fallback content is a valid mode,
      content_source reports which mode is active
"""

from fastapi import APIRouter, Depends, status

from prenatal_api.infrastructure.anthropic_client import get_messages_client

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "prenatal-companion-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(client=Depends(get_messages_client)):
    """Readiness probe — reports whether answers come from the model or fallback tables."""
    return {
        "status": "ready",
        "checks": {"content_source": "model" if client is not None else "fallback"},
    }
