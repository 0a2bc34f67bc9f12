"""Catalogue API package."""

from catalogue.api.routes import router

__all__ = ["router"]
