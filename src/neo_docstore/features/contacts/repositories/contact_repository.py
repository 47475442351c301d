"""Contact repository wiring."""

from typing import Optional

from ....config.settings import DocstoreSettings
from ....repositories.base import BaseRepository
from ...database.entities import DocumentStore
from ..entities import Contact

CONTACTS_COLLECTION = "contacts"


def create_contact_repository(
    store: DocumentStore,
    settings: Optional[DocstoreSettings] = None,
    **overrides,
) -> BaseRepository[Contact]:
    """Build the repository for the ``contacts`` collection."""
    options = {}
    if settings is not None:
        options.update(
            soft_delete=settings.soft_delete_enabled,
            max_page_size=settings.max_page_size,
            default_page_size=settings.default_page_size,
        )
    options.update(overrides)
    return BaseRepository(
        store,
        CONTACTS_COLLECTION,
        entity_factory=Contact.from_record,
        entity_type="Contact",
        **options,
    )
