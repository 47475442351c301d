"""Contact repositories."""

from .contact_repository import CONTACTS_COLLECTION, create_contact_repository

__all__ = ["CONTACTS_COLLECTION", "create_contact_repository"]
