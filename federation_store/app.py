"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: MIT-0
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .config import Settings, settings as default_settings
from .serialization import get_serializer
from .store.interface import StoreClient
from .store.redis_store import RedisClient
from .store.ttl_store import TTLStore

log = logging.getLogger("federation-store")

_instance: TTLStore | None = None
_instance_lock = threading.Lock()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )


def create_store(
    settings: Settings | None = None, client: StoreClient | None = None
) -> TTLStore:
    """Build the facade from settings; `client` replaces the Redis client (tests)."""
    settings = settings or default_settings
    if client is None:
        client = RedisClient.from_settings(settings)
        log.info(
            "Connected store client to %s:%s (bucket=%s)",
            settings.host,
            settings.port,
            settings.bucket,
        )
    return TTLStore(
        client,
        settings.bucket,
        serializer=get_serializer(settings.serializer),
    )


@contextmanager
def open_store(
    settings: Settings | None = None, client: StoreClient | None = None
) -> Iterator[TTLStore]:
    store = create_store(settings, client)
    try:
        yield store
    finally:
        store.close()
        log.info("Store client closed")


def get_instance() -> TTLStore:
    """Return the process-wide store, building it on first use."""
    global _instance
    if _instance is not None:
        return _instance
    with _instance_lock:
        if _instance is None:
            _instance = create_store()
    return _instance


def reset_instance() -> None:
    """Close and forget the process-wide store."""
    global _instance
    with _instance_lock:
        if _instance is not None:
            _instance.close()
        _instance = None
