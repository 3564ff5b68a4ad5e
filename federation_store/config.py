import os
from dataclasses import dataclass
from typing import Callable, Literal, TypeVar

SerializerName = Literal["json", "pickle"]

T = TypeVar("T")


def _env(name: str, default: str) -> str:
    # Unset and empty both mean "use the default"
    return os.environ.get(name) or default


def _env_as(name: str, cast: Callable[[str], T], default: T) -> T:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    picked = _env(name, default).lower()
    return picked if picked in choices else default


@dataclass(frozen=True)
class Settings:
    # Backend
    host: str = "localhost"
    port: int = 8098
    bucket: str = "simpleSAMLphp"
    db: int = 0
    password: str | None = None
    socket_timeout_seconds: float = 5.0

    # Behavior
    serializer: SerializerName = "json"
    log_level: str = "INFO"


def load() -> Settings:
    return Settings(
        host=_env("STORE_HOST", "localhost"),
        port=_env_as("STORE_PORT", int, 8098),
        bucket=_env("STORE_BUCKET", "simpleSAMLphp"),
        db=_env_as("STORE_DB", int, 0),
        password=os.environ.get("STORE_PASSWORD") or None,
        socket_timeout_seconds=_env_as("STORE_SOCKET_TIMEOUT_SECONDS", float, 5.0),
        serializer=_env_choice("STORE_SERIALIZER", ("json", "pickle"), "json"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )


# Loaded once at import; call load() again to pick up a changed environment
settings: Settings = load()
