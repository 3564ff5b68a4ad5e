import json
import logging
from typing import Any

import redis

from ..config import Settings
from ..errors import DeserializationError, StoreUnavailable
from ..models import Location
from .interface import StoreClient

log = logging.getLogger("federation-store")


class RedisClient(StoreClient):
    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisClient":
        return cls(
            redis.Redis(
                host=settings.host,
                port=int(settings.port),
                db=settings.db,
                password=settings.password,
                socket_timeout=settings.socket_timeout_seconds,
                socket_connect_timeout=settings.socket_timeout_seconds,
            )
        )

    def fetch(self, location: Location) -> dict[str, Any] | None:
        try:
            raw = self._client.get(location.address)
        except redis.exceptions.RedisError as e:
            log.error("Fetch failed for %s: %s", location.address, e)
            raise StoreUnavailable(
                f"Failed to fetch {location.address}: {e}",
                details={"address": location.address},
            ) from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            raise DeserializationError(
                f"Stored document at {location.address} is not valid JSON",
                details={"address": location.address},
            ) from e

    def store(self, location: Location, payload: dict[str, Any]) -> None:
        doc = json.dumps(payload, separators=(",", ":"))
        try:
            self._client.set(location.address, doc)
        except redis.exceptions.RedisError as e:
            log.error("Store failed for %s: %s", location.address, e)
            raise StoreUnavailable(
                f"Failed to store {location.address}: {e}",
                details={"address": location.address},
            ) from e

    def delete(self, location: Location) -> None:
        try:
            self._client.delete(location.address)
        except redis.exceptions.RedisError as e:
            log.error("Delete failed for %s: %s", location.address, e)
            raise StoreUnavailable(
                f"Failed to delete {location.address}: {e}",
                details={"address": location.address},
            ) from e

    def close(self) -> None:
        self._client.close()
