"""Core package for the personapi service.

This top-level module exposes the database :func:`get_session` helper for
interacting with the service's persistence layer.
"""

from .db import get_session

__all__ = ["get_session"]
