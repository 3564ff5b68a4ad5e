from typing import Any

from ..models import Location


class KeyValueStore:
    def get(self, namespace: str, key: str) -> Any | None:
        """
        Return the value stored at (namespace, key) if present and not expired; otherwise None.
        """
        raise NotImplementedError

    def set(self, namespace: str, key: str, value: Any, expire: int | None = None) -> None:
        """
        Store value, replacing any previous record. `expire` is an absolute unix timestamp.
        """
        raise NotImplementedError

    def delete(self, namespace: str, key: str) -> None:
        """
        Remove the record at (namespace, key); a missing record is not an error.
        """
        raise NotImplementedError


class StoreClient:
    def fetch(self, location: Location) -> dict[str, Any] | None:
        """
        Return the raw document stored at location, or None.
        """
        raise NotImplementedError

    def store(self, location: Location, payload: dict[str, Any]) -> None:
        """
        Write the document at location, overwriting what was there.
        """
        raise NotImplementedError

    def delete(self, location: Location) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass
