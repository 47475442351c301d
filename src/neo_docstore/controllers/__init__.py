"""Controller layer for neo-docstore."""

from .base import BaseController

__all__ = ["BaseController"]
