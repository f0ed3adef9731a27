from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_USER_AGENT = "screen-reader-check/0.1 (+https://www.w3.org/WAI/)"


@dataclass(frozen=True)
class WebFetchConfig:
    timeout_seconds: int = 30
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = 2


def get_fetch_config() -> WebFetchConfig:
    """
    Load fetcher configuration from environment variables.

    Reads A11Y_FETCH_TIMEOUT_SECONDS, A11Y_FETCH_USER_AGENT and
    A11Y_FETCH_MAX_RETRIES; unset values fall back to the defaults.
    """
    return WebFetchConfig(
        timeout_seconds=_int_env("A11Y_FETCH_TIMEOUT_SECONDS", 30),
        user_agent=os.getenv("A11Y_FETCH_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        max_retries=_int_env("A11Y_FETCH_MAX_RETRIES", 2),
    )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < 0:
        raise ValueError(f"{name} must not be negative")
    return parsed
