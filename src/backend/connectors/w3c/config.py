from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_VALIDATOR_URL = "https://validator.w3.org/nu/"


@dataclass(frozen=True)
class W3CValidatorConfig:
    url: str = DEFAULT_VALIDATOR_URL
    timeout_seconds: int = 30
    max_retries: int = 1


def get_validator_config() -> W3CValidatorConfig:
    """
    Load validator configuration from environment variables.

    Reads W3C_VALIDATOR_URL, W3C_VALIDATOR_TIMEOUT_SECONDS and
    W3C_VALIDATOR_MAX_RETRIES.
    """
    url = os.getenv("W3C_VALIDATOR_URL", "").strip() or DEFAULT_VALIDATOR_URL
    if not url.startswith(("http://", "https://")):
        raise ValueError("W3C_VALIDATOR_URL must be an http(s) URL.")
    return W3CValidatorConfig(
        url=url,
        timeout_seconds=_int_env("W3C_VALIDATOR_TIMEOUT_SECONDS", 30),
        max_retries=_int_env("W3C_VALIDATOR_MAX_RETRIES", 1),
    )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
