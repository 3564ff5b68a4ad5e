import importlib
from typing import Any

import pytest


def import_config() -> Any:
	return importlib.import_module("federation_store.config")


def test_defaults(monkeypatch: pytest.MonkeyPatch):
	# Clear env to ensure defaults are used
	for k in [
		"STORE_HOST",
		"STORE_PORT",
		"STORE_BUCKET",
		"STORE_DB",
		"STORE_PASSWORD",
		"STORE_SOCKET_TIMEOUT_SECONDS",
		"STORE_SERIALIZER",
		"LOG_LEVEL",
	]:
		monkeypatch.delenv(k, raising=False)

	conf = import_config()
	settings = conf.load()
	assert settings.host == "localhost"
	assert settings.port == 8098
	assert settings.bucket == "simpleSAMLphp"
	assert settings.db == 0
	assert settings.password is None
	assert settings.socket_timeout_seconds == 5.0
	assert settings.serializer == "json"
	assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv("STORE_HOST", "kv.internal")
	monkeypatch.setenv("STORE_PORT", "6379")
	monkeypatch.setenv("STORE_BUCKET", "idp")
	monkeypatch.setenv("STORE_DB", "2")
	monkeypatch.setenv("STORE_PASSWORD", "s3cret")
	monkeypatch.setenv("STORE_SOCKET_TIMEOUT_SECONDS", "1.5")
	monkeypatch.setenv("STORE_SERIALIZER", "PICKLE")  # case-insensitive
	monkeypatch.setenv("LOG_LEVEL", "debug")

	conf = import_config()
	settings = conf.load()
	assert settings.host == "kv.internal"
	assert settings.port == 6379
	assert settings.bucket == "idp"
	assert settings.db == 2
	assert settings.password == "s3cret"
	assert settings.socket_timeout_seconds == 1.5
	assert settings.serializer == "pickle"
	assert settings.log_level == "DEBUG"


def test_invalid_values_fallback(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv("STORE_PORT", "not-int")
	monkeypatch.setenv("STORE_SOCKET_TIMEOUT_SECONDS", "not-float")
	monkeypatch.setenv("STORE_SERIALIZER", "yaml")
	monkeypatch.setenv("STORE_BUCKET", "")

	conf = import_config()
	settings = conf.load()
	assert settings.port == 8098
	assert settings.socket_timeout_seconds == 5.0
	assert settings.serializer == "json"
	assert settings.bucket == "simpleSAMLphp"
