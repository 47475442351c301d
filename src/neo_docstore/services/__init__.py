"""Service layer for neo-docstore."""

from .base import BaseService

__all__ = ["BaseService"]
