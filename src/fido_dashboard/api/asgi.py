"""ASGI entrypoint for the FIDO dashboard API."""

from fastapi import FastAPI

from fido_dashboard.api.app import create_app
from fido_dashboard.config import Settings
from fido_dashboard.containers import build_container


def build_app() -> FastAPI:
    """Build the app from environment settings."""
    return create_app(build_container(Settings()))


app = build_app()
