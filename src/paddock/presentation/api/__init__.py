"""FastAPI application for the Paddock identity service."""

from paddock.presentation.api.app import create_app

__all__ = ["create_app"]
