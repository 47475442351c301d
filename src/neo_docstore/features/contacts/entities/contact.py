"""Contact domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

# Stored camelCase field -> entity attribute
FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "postalCode": "postal_code",
    "city": "city",
    "country": "country",
    "message": "message",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "deletedAt": "deleted_at",
}


@dataclass
class Contact:
    """A contact request stored in the ``contacts`` collection."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Contact":
        """Build a contact from an ``{id, ...stored fields}`` record."""
        values = {attr: record.get(key) for key, attr in FIELD_MAP.items()}
        for required in ("first_name", "last_name", "email", "phone"):
            if values[required] is None:
                values[required] = ""
        return cls(id=record["id"], **values)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        for key, attr in FIELD_MAP.items():
            value = getattr(self, attr)
            data[key] = value.isoformat() if isinstance(value, datetime) else value
        return data
