"""Serializers that turn stored values into strings and back.

The facade treats serialized values as opaque strings; which serializer is
used is a construction-time choice:

    store = TTLStore(client, bucket, serializer=PickleSerializer())
"""

import base64
import json
import math
import pickle
from typing import Any, Protocol

from .errors import InvalidArgument


class Serializer(Protocol):
    def serialize(self, value: Any) -> str: ...

    def deserialize(self, data: str) -> Any: ...


def _check_json_safe(value: Any, path: str = "value") -> None:
    # Only types that come back from json.loads unchanged
    kind = type(value)
    if value is None or kind in (bool, int, str):
        return
    if kind is float:
        if not math.isfinite(value):
            raise TypeError(f"{path} is {value!r}, which JSON cannot round-trip")
        return
    if kind is list:
        for i, item in enumerate(value):
            _check_json_safe(item, f"{path}[{i}]")
        return
    if kind is dict:
        for k, item in value.items():
            if type(k) is not str:
                raise TypeError(f"{path} has a {type(k).__name__} key {k!r}; JSON keys are strings")
            _check_json_safe(item, f"{path}[{k!r}]")
        return
    raise TypeError(f"{path} is a {kind.__name__}, which JSON cannot round-trip")


class JsonSerializer:
    """JSON serializer for dicts, lists and primitives.

    Values JSON would hand back in a different shape (tuples, sets, non-string
    dict keys) are refused with TypeError; use PickleSerializer for those.
    """

    def serialize(self, value: Any) -> str:
        _check_json_safe(value)
        return json.dumps(value, separators=(",", ":"))

    def deserialize(self, data: str) -> Any:
        return json.loads(data)


class PickleSerializer:
    """Pickles arbitrary objects, base64-encoded so they fit a JSON document.

    Loading a pickle can run arbitrary code: only use this against a store
    that nobody else can write to.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def serialize(self, value: Any) -> str:
        return base64.b64encode(pickle.dumps(value, protocol=self._protocol)).decode()

    def deserialize(self, data: str) -> Any:
        return pickle.loads(base64.b64decode(data.encode(), validate=True))


_SERIALIZERS: dict[str, type] = {
    "json": JsonSerializer,
    "pickle": PickleSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Build the serializer registered under `name` ("json" or "pickle")."""
    factory = _SERIALIZERS.get((name or "").lower())
    if factory is None:
        raise InvalidArgument(
            f"Unknown serializer: {name!r}", details={"known": sorted(_SERIALIZERS)}
        )
    return factory()
