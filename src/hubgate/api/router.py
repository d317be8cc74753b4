"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from hubgate.api.routes import events, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(events.router)
