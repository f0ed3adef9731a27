"""Client for the W3C Nu HTML validator (network lives here; issue filtering lives in the valid_html rule)."""

from .client import ValidatorError, W3CValidatorClient
from .config import W3CValidatorConfig, get_validator_config

__all__ = ["ValidatorError", "W3CValidatorClient", "W3CValidatorConfig", "get_validator_config"]
