import importlib
from typing import Any

import pytest


class DummyRedis:
	"""In-memory stand-in for redis.Redis covering the calls the client makes."""

	def __init__(self):
		self.data: dict[str, bytes] = {}
		self.calls: list[tuple[str, str]] = []
		self.closed = False

	def get(self, name: str):
		self.calls.append(("get", name))
		return self.data.get(name)

	def set(self, name: str, value: str):
		self.calls.append(("set", name))
		self.data[name] = value.encode() if isinstance(value, str) else value
		return True

	def delete(self, *names: str):
		removed = 0
		for name in names:
			self.calls.append(("delete", name))
			if self.data.pop(name, None) is not None:
				removed += 1
		return removed

	def close(self):
		self.closed = True


class Clock:
	def __init__(self, now: float):
		self.now = now

	def __call__(self) -> float:
		return self.now

	def advance(self, seconds: float) -> None:
		self.now += seconds


@pytest.fixture
def dummy_redis() -> DummyRedis:
	return DummyRedis()


@pytest.fixture
def clock() -> Clock:
	return Clock(1_700_000_000.0)


@pytest.fixture
def store(dummy_redis: DummyRedis, clock: Clock) -> Any:
	redis_store = importlib.import_module("federation_store.store.redis_store")
	ttl_store = importlib.import_module("federation_store.store.ttl_store")
	client = redis_store.RedisClient(dummy_redis)
	return ttl_store.TTLStore(client, "simpleSAMLphp", clock=clock)
