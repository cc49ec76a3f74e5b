"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from ..config import SERVER_VERSION
from .routes import health, tools


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    The lifespan starts and stops the given Application; without one a
    default Application (storage from INTRACOM_STORAGE) is created.
    """
    if application is None:
        application = Application()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="IntraCom Agent Bus",
        description="Agent registry and allowlist-enforced mailboxes",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    fastapi_app.include_router(tools.create_tools_router(application))
    fastapi_app.include_router(health.create_health_router(application))

    return fastapi_app
