from __future__ import annotations

import logging
import time
from http.client import HTTPException
from urllib.error import HTTPError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from .config import WebFetchConfig, get_fetch_config

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = (429, 500, 502, 503, 504)


class FetchError(RuntimeError):
    def __init__(self, status: int, message: str, url: str):
        super().__init__(f"Fetching {url} failed ({status}): {message}")
        self.status = status
        self.url = url


def fetch_html(url: str, config: WebFetchConfig | None = None) -> str:
    """
    Download the HTML document at ``url``.

    Transient failures (connection errors, 429 and 5xx) are retried with
    exponential backoff; anything else raises `FetchError` right away.
    """
    if urlparse(url).scheme not in ("http", "https"):
        raise FetchError(0, "only http and https URLs can be fetched", url)

    config = config or get_fetch_config()
    retries = 0
    backoff = 0.5

    while True:
        req = Request(url, method="GET")
        req.add_header("Accept", "text/html,application/xhtml+xml")
        req.add_header("User-Agent", config.user_agent)

        try:
            with urlopen(req, timeout=config.timeout_seconds) as resp:
                charset = resp.headers.get_content_charset() or "utf-8"
                raw = resp.read()
        except HTTPError as exc:
            if exc.code in RETRYABLE_STATUSES and retries < config.max_retries:
                logger.debug("retrying %s after HTTP %s", url, exc.code)
                time.sleep(backoff)
                retries += 1
                backoff *= 2
                continue
            raise FetchError(exc.code, str(exc.reason), url) from exc
        except (OSError, HTTPException) as exc:
            # URLError, socket timeouts and dropped connections.
            reason = getattr(exc, "reason", None) or str(exc) or type(exc).__name__
            if retries < config.max_retries:
                logger.debug("retrying %s after %s", url, reason)
                time.sleep(backoff)
                retries += 1
                backoff *= 2
                continue
            raise FetchError(0, str(reason), url) from exc

        try:
            html = raw.decode(charset, errors="replace")
        except LookupError:
            logger.debug("unknown charset %r for %s, decoding as utf-8", charset, url)
            html = raw.decode("utf-8", errors="replace")
        if not html.strip():
            raise FetchError(200, "empty response body", url)
        return html
