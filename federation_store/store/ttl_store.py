import logging
import time
from typing import Any, Callable

from ..errors import DeserializationError, InvalidArgument
from ..helpers import validate_expire, validate_name
from ..models import Location, Record
from ..serialization import JsonSerializer, Serializer
from .interface import KeyValueStore, StoreClient

log = logging.getLogger("federation-store")


class TTLStore(KeyValueStore):
    """Key/value facade with lazy expiration on top of a StoreClient.

    Expired records are only removed when a read finds them; there is no sweep.
    """

    def __init__(
        self,
        client: StoreClient,
        bucket: str,
        serializer: Serializer | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.client = client
        self.bucket = bucket
        self._serializer = serializer or JsonSerializer()
        self._clock = clock

    def __enter__(self) -> "TTLStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _location(self, namespace: str, key: str) -> Location:
        is_valid_ns, ns_error = validate_name(namespace, "namespace")
        if not is_valid_ns:
            log.warning("Rejected namespace: %s", ns_error)
            raise InvalidArgument(ns_error)

        is_valid_key, key_error = validate_name(key, "key")
        if not is_valid_key:
            log.warning("Rejected key: %s", key_error)
            raise InvalidArgument(key_error)

        return Location(self.bucket, namespace, key)

    def get(self, namespace: str, key: str) -> Any | None:
        location = self._location(namespace, key)
        payload = self.client.fetch(location)
        if payload is None:
            log.debug("Miss for %s", location.address)
            return None

        record = Record.from_dict(payload)
        if record.is_expired(self._clock()):
            log.info("Record %s expired at %s; deleting", location.address, record.expires_at)
            self.client.delete(location)
            return None

        try:
            return self._serializer.deserialize(record.value)
        except Exception as e:
            raise DeserializationError(
                f"Could not decode value at {location.address}: {e}",
                details={"address": location.address},
            ) from e

    def set(self, namespace: str, key: str, value: Any, expire: int | None = None) -> None:
        location = self._location(namespace, key)

        is_valid, error = validate_expire(expire)
        if not is_valid:
            log.warning("Rejected expire for %s: %s", location.address, error)
            raise InvalidArgument(error, details={"expire": expire})

        try:
            serialized = self._serializer.serialize(value)
        except Exception as e:
            raise InvalidArgument(
                f"Value for {location.address} cannot be serialized: {e}",
                details={"address": location.address},
            ) from e

        log.debug("Storing %s (expires=%s)", location.address, expire)
        self.client.store(location, Record(serialized, expire).to_dict())

    def delete(self, namespace: str, key: str) -> None:
        location = self._location(namespace, key)
        log.debug("Deleting %s", location.address)
        self.client.delete(location)

    def close(self) -> None:
        self.client.close()
