"""
Minimal models for the records this adapter keeps in the backing store.

A record lives at one location and is stored as a small JSON document:

    {"value": "<serialized value>", "expires": 1767225600}

``expires`` is optional. Anything else in the document is ignored on read so
that records written by newer code don't break older readers.
"""

from dataclasses import dataclass
from typing import Any

from .errors import DeserializationError


@dataclass(frozen=True)
class Location:
    bucket: str
    namespace: str
    key: str

    @property
    def address(self) -> str:
        # Backend key, e.g. "simpleSAMLphp:7:session:abc123". The namespace is
        # length-prefixed so colons inside namespace or key can't collide.
        return f"{self.bucket}:{len(self.namespace)}:{self.namespace}:{self.key}"


@dataclass
class Record:
    value: str
    expires_at: int | None = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": self.value}
        if self.expires_at is not None:
            data["expires"] = int(self.expires_at)
        return data

    @staticmethod
    def from_dict(d: Any) -> "Record":
        if not isinstance(d, dict):
            raise DeserializationError(
                f"Stored payload must be an object, got: {type(d).__name__}"
            )
        value = d.get("value")
        if not isinstance(value, str):
            raise DeserializationError("Stored payload has no 'value' string")
        raw_expires = d.get("expires")
        if raw_expires is None:
            return Record(value=value)
        if isinstance(raw_expires, bool):
            raise DeserializationError(f"Invalid 'expires' field: {raw_expires!r}")
        try:
            expires_at = int(raw_expires)
        except (TypeError, ValueError) as e:
            raise DeserializationError(
                f"Invalid 'expires' field: {raw_expires!r}"
            ) from e
        return Record(value=value, expires_at=expires_at)
