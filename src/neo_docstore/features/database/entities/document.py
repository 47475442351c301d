"""Raw document returned by a document store."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class StoredDocument:
    """A document as read from the store, before any mapping.

    ``data`` holds store-native values (Firestore timestamps included); the
    result mapper and repositories are responsible for normalizing them.
    """

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
