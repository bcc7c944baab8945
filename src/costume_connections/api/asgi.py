"""ASGI entrypoint for the costume connections site."""

from costume_connections.api.app import create_app
from costume_connections.containers import build_container

app = create_app(build_container())
