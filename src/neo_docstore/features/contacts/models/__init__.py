"""Contact API models."""

from .requests import ContactCreate, ContactUpdate

__all__ = ["ContactCreate", "ContactUpdate"]
