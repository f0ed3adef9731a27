from __future__ import annotations

import json
import logging
import time
import uuid
from http.client import HTTPException
from typing import Any, List
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from common.a11y_engine.errors import ValidatorUnavailableError
from common.a11y_engine.models import ValidatorIssue

from .config import W3CValidatorConfig, get_validator_config

logger = logging.getLogger(__name__)


class ValidatorError(ValidatorUnavailableError):
    def __init__(self, status: int, message: str, body: str | None = None):
        super().__init__(f"W3C validator HTTP {status}: {message}")
        self.status = status
        self.body = body


class W3CValidatorClient:
    """Posts documents to the Nu validator and returns its messages as issues."""

    def __init__(self, config: W3CValidatorConfig | None = None):
        self._config = config or get_validator_config()

    def validate(self, html: str) -> List[ValidatorIssue]:
        payload = self._post(html)
        messages = payload.get("messages")
        if not isinstance(messages, list):
            raise ValidatorError(200, "response has no messages list")
        return [_to_issue(message) for message in messages if isinstance(message, dict)]

    def _post(self, html: str) -> dict[str, Any]:
        body, content_type = _multipart(html)
        retries = 0
        backoff = 0.5

        while True:
            req = Request(self._config.url, data=body, method="POST")
            req.add_header("Content-Type", content_type)
            req.add_header("Accept", "application/json")

            try:
                with urlopen(req, timeout=self._config.timeout_seconds) as resp:
                    raw_bytes = resp.read()
            except HTTPError as exc:
                error_body = exc.read().decode("utf-8", errors="replace") if exc.fp else None
                if exc.code in (429, 500, 502, 503, 504) and retries < self._config.max_retries:
                    time.sleep(backoff)
                    retries += 1
                    backoff *= 2
                    continue
                raise ValidatorError(exc.code, str(exc.reason), error_body) from exc
            except (OSError, HTTPException) as exc:
                # URLError, socket timeouts and dropped connections.
                reason = getattr(exc, "reason", None) or str(exc) or type(exc).__name__
                if retries < self._config.max_retries:
                    logger.debug("retrying validator request after %s", reason)
                    time.sleep(backoff)
                    retries += 1
                    backoff *= 2
                    continue
                raise ValidatorError(0, str(reason)) from exc

            raw = raw_bytes.decode("utf-8", errors="replace")
            try:
                payload = json.loads(raw)
            except ValueError as exc:
                raise ValidatorError(200, "response is not JSON", raw) from exc
            if not isinstance(payload, dict):
                raise ValidatorError(200, "response is not a JSON object", raw)
            logger.debug("validator returned %d message(s)", len(payload.get("messages") or []))
            return payload


def _multipart(html: str) -> tuple[bytes, str]:
    boundary = uuid.uuid4().hex
    lines = [
        f"--{boundary}",
        'Content-Disposition: form-data; name="out"',
        "",
        "json",
        f"--{boundary}",
        'Content-Disposition: form-data; name="content"; filename="index.html"',
        "Content-Type: text/html; charset=utf-8",
        "",
        html,
        f"--{boundary}--",
        "",
    ]
    return "\r\n".join(lines).encode("utf-8"), f"multipart/form-data; boundary={boundary}"


def _to_issue(message: dict[str, Any]) -> ValidatorIssue:
    return ValidatorIssue(
        type=str(message.get("type", "")),
        sub_type=message.get("subType"),
        message=str(message.get("message", "")),
        extract=str(message.get("extract", "")),
        last_line=message.get("lastLine"),
    )
