"""Opaque ``lastVisible`` cursor tokens.

A token is URL-safe base64 of a compact JSON object carrying the id of the
last document on a page. Stores resolve the id to their native start-after
bound.
"""

import base64
import binascii
import json
from typing import Any, Dict

from ...core.exceptions import InvalidCursorError


def encode_cursor(document_id: str) -> str:
    """Encode the last document id of a page as a cursor token."""
    payload: Dict[str, Any] = {"id": document_id}
    json_str = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    return base64.urlsafe_b64encode(json_str.encode()).decode().rstrip("=")


def decode_cursor(cursor: str) -> str:
    """Decode a cursor token back into a document id."""
    # Add padding if needed
    padded = cursor
    padding = 4 - (len(cursor) % 4)
    if padding != 4:
        padded += "=" * padding

    try:
        json_str = base64.urlsafe_b64decode(padded.encode()).decode()
        payload = json.loads(json_str)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
        raise InvalidCursorError(cursor, f"malformed token ({e})") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("id"), str) or not payload["id"]:
        raise InvalidCursorError(cursor, "token does not carry a document id")
    return payload["id"]
