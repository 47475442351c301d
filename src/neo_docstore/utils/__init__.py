"""Shared utilities for neo-docstore."""

from .concurrency import gather_or_cancel
from .datetime import utc_now, ensure_utc, is_temporal, to_datetime

__all__ = ["gather_or_cancel", "utc_now", "ensure_utc", "is_temporal", "to_datetime"]
