"""Fetch HTML documents over HTTP(S) for checks created from a URL."""

from .config import WebFetchConfig, get_fetch_config
from .fetch import FetchError, fetch_html

__all__ = ["WebFetchConfig", "get_fetch_config", "FetchError", "fetch_html"]
