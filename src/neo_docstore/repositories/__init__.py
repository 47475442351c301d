"""Repository layer for neo-docstore."""

from .base import BaseRepository, PROTECTED_FIELDS, to_payload

__all__ = ["BaseRepository", "PROTECTED_FIELDS", "to_payload"]
