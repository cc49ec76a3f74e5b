"""API routes."""

from . import health, tools

__all__ = ["health", "tools"]
