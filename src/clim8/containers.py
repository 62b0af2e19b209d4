"""Dependency container wiring for the application."""

from dataclasses import dataclass

from clim8.config import Settings
from clim8.services.footprint import FootprintService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    footprint_service: FootprintService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    footprint_service = FootprintService(
        report_title=resolved_settings.report_title,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        footprint_service=footprint_service,
    )
