"""Health check route."""

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import Application


class HealthResponse(BaseModel):
    """Response model for health."""

    status: str
    agents: int


def create_health_router(app: Application) -> APIRouter:
    """Create health router."""
    router = APIRouter(prefix="/api", tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Report readiness and the number of registered agents."""
        return {"status": "ok", "agents": len(app.state_store.state.agents)}

    return router
