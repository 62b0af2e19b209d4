"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import HTMLResponse

from clim8.api.models import FootprintAnalysisResponse, ReportResponse
from clim8.api.report_page import render_report_html
from clim8.app_logging import configure_logging
from clim8.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Clim8")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/footprint")
    async def footprint(
        request: Request, payload: dict[str, Any] = Body(...)
    ) -> FootprintAnalysisResponse:
        """Return the footprint, impact areas, tips and chart data."""
        state_container: AppContainer = request.app.state.container
        analysis = state_container.footprint_service.analyze(payload)
        return FootprintAnalysisResponse.model_validate(analysis)

    @app.post("/footprint/report")
    async def footprint_report(
        request: Request, payload: dict[str, Any] = Body(...)
    ) -> ReportResponse:
        """Return the report document as JSON."""
        state_container: AppContainer = request.app.state.container
        document = state_container.footprint_service.report(payload)
        return ReportResponse.model_validate(document)

    @app.post("/footprint/report/html", response_class=HTMLResponse)
    async def footprint_report_html(
        request: Request, payload: dict[str, Any] = Body(...)
    ) -> HTMLResponse:
        """Return the report as a printable HTML page."""
        state_container: AppContainer = request.app.state.container
        document = state_container.footprint_service.report(payload)
        logger.debug("Rendering report generated at %s", document.generated_at)
        return HTMLResponse(render_report_html(document))

    return app
