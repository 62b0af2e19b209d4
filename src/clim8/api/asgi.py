"""ASGI entrypoint for the footprint API."""

from clim8.api.app import create_app
from clim8.containers import build_container

app = create_app(build_container())
