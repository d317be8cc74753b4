"""Health check endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "hubgate", "version": "0.1.0"}


@router.get("/health/live")
async def liveness():
    """Kubernetes liveness probe: always returns 200 if process is running."""
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness(request: Request):
    """Ready once a validator is installed; flags an empty trust set."""
    validator = getattr(request.app.state, "github_validator", None)
    if validator is None:
        return JSONResponse(status_code=503, content={"status": "not_ready", "checks": {"validator": "missing"}})

    trust = "configured" if request.app.state.trust_anchors_configured else "empty"
    return {"status": "ready", "checks": {"validator": "ok", "trust_anchors": trust}}
