"""Command-line interface for Nova."""

from .app import app

__all__ = ["app"]
