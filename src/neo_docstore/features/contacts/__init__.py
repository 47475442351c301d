"""Contacts feature: entity, request models, repository, service and controller wiring."""

from typing import Optional

from ...config.settings import DocstoreSettings
from ...controllers.base import BaseController
from ..database.entities import DocumentStore
from .entities import Contact
from .models import ContactCreate, ContactUpdate
from .repositories import CONTACTS_COLLECTION, create_contact_repository
from .services import ContactService


def build_contact_controller(
    store: DocumentStore,
    settings: Optional[DocstoreSettings] = None,
) -> BaseController[Contact]:
    """Compose repository, service and controller for contacts."""
    repository = create_contact_repository(store, settings)
    service = ContactService(repository)
    return BaseController(service, create_model=ContactCreate, update_model=ContactUpdate)


__all__ = [
    "Contact",
    "ContactCreate",
    "ContactUpdate",
    "CONTACTS_COLLECTION",
    "create_contact_repository",
    "ContactService",
    "build_contact_controller",
]
