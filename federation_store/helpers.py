import time
from typing import Any, Callable

# Anything at or below 30 days past the epoch looks like a relative duration.
RELATIVE_EXPIRE_LIMIT = 30 * 24 * 3600


def validate_name(name: Any, field_name: str = "name") -> tuple[bool, str | None]:
    """
    Validate a namespace or key: a non-empty string.
    Returns (is_valid, error_message).
    """
    if name is None or name == "":
        return False, f"{field_name} cannot be empty or None"

    if not isinstance(name, str):
        return False, f"{field_name} must be a string, got: {type(name).__name__}"

    return True, None


def validate_expire(expire: Any) -> tuple[bool, str | None]:
    """
    Validate an expiry as an absolute unix timestamp (or None for no expiry).
    Returns (is_valid, error_message).
    """
    if expire is None:
        return True, None

    if isinstance(expire, bool) or not isinstance(expire, int):
        return False, f"expire must be an integer unix timestamp, got: {type(expire).__name__}"

    if expire <= RELATIVE_EXPIRE_LIMIT:
        return (
            False,
            f"expire must be an absolute unix timestamp, got {expire} "
            f"(looks like a duration; use expire_after())",
        )

    return True, None


def expire_after(seconds: int, clock: Callable[[], float] = time.time) -> int:
    """Return the absolute unix timestamp `seconds` from now."""
    return int(clock()) + int(seconds)
