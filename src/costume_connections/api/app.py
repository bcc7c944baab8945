"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from costume_connections.api.admin import router as admin_router
from costume_connections.api.costumes import router as costumes_router
from costume_connections.api.views import STATIC_DIR, templates
from costume_connections.app_logging import configure_logging
from costume_connections.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI(title="Costume Connections")
    app.state.container = container

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(costumes_router)
    app.include_router(admin_router)

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        """Render the landing page."""
        return templates.TemplateResponse(request, "index.html", {"title": "Home"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
