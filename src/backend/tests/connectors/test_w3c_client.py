import json
from unittest.mock import Mock, patch
from http.client import RemoteDisconnected
from urllib.error import HTTPError

import pytest

from common.a11y_engine.errors import ValidatorUnavailableError
from connectors.w3c.client import ValidatorError, W3CValidatorClient
from connectors.w3c.config import W3CValidatorConfig, get_validator_config


def _response(payload) -> Mock:
    response = Mock()
    response.read.return_value = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    response.__enter__ = Mock(return_value=response)
    response.__exit__ = Mock(return_value=False)
    return response


def test_validate_posts_multipart_and_maps_messages():
    captured = {}

    def _fake_urlopen(req, timeout=30):
        captured["url"] = req.full_url
        captured["method"] = req.get_method()
        captured["content_type"] = req.get_header("Content-type")
        captured["body"] = req.data.decode("utf-8")
        return _response(
            {
                "messages": [
                    {"type": "error", "message": "Stray end tag “div”.", "extract": "</div>", "lastLine": 4},
                    {"type": "info", "subType": "warning", "message": "Consider using lang."},
                ]
            }
        )

    client = W3CValidatorClient(W3CValidatorConfig(url="https://validator.example/nu/"))
    with patch("connectors.w3c.client.urlopen", _fake_urlopen):
        issues = client.validate("<!DOCTYPE html><p>x</p></div>")

    assert captured["url"] == "https://validator.example/nu/"
    assert captured["method"] == "POST"
    assert captured["content_type"].startswith("multipart/form-data; boundary=")
    assert 'name="out"\r\n\r\njson' in captured["body"]
    assert "<!DOCTYPE html><p>x</p></div>" in captured["body"]

    assert [(i.type, i.sub_type, i.last_line) for i in issues] == [("error", None, 4), ("info", "warning", None)]
    assert issues[0].extract == "</div>"


def test_malformed_responses_raise_validator_error():
    client = W3CValidatorClient(W3CValidatorConfig())
    for payload in (b"<html>busy</html>", [1, 2], {"url": "x"}):
        with patch("connectors.w3c.client.urlopen", lambda req, timeout=30, p=payload: _response(p)):
            with pytest.raises(ValidatorError):
                client.validate("<p>x</p>")


def test_transport_errors_are_retried_then_raised():
    calls = []

    def _fake_urlopen(req, timeout=30):
        calls.append(1)
        raise HTTPError(req.full_url, 503, "Service Unavailable", {}, None)

    client = W3CValidatorClient(W3CValidatorConfig(max_retries=1))
    with patch("connectors.w3c.client.urlopen", _fake_urlopen), patch("connectors.w3c.client.time.sleep"):
        with pytest.raises(ValidatorUnavailableError) as exc:
            client.validate("<p>x</p>")

    assert len(calls) == 2
    assert exc.value.status == 503


def test_validator_config_from_env(monkeypatch):
    monkeypatch.setenv("W3C_VALIDATOR_URL", "http://localhost:8888/")
    monkeypatch.setenv("W3C_VALIDATOR_TIMEOUT_SECONDS", "3")
    monkeypatch.delenv("W3C_VALIDATOR_MAX_RETRIES", raising=False)
    assert get_validator_config() == W3CValidatorConfig(url="http://localhost:8888/", timeout_seconds=3, max_retries=1)

    monkeypatch.setenv("W3C_VALIDATOR_URL", "ftp://validator")
    with pytest.raises(ValueError):
        get_validator_config()


def test_socket_timeouts_and_dropped_connections_become_validator_errors():
    calls = []

    def _fake_urlopen(req, timeout=30):
        calls.append(timeout)
        if len(calls) == 1:
            raise RemoteDisconnected("Remote end closed connection without response")
        response = _response(b"")
        response.read.side_effect = TimeoutError("timed out")
        return response

    client = W3CValidatorClient(W3CValidatorConfig(timeout_seconds=2, max_retries=1))
    with patch("connectors.w3c.client.urlopen", _fake_urlopen), patch("connectors.w3c.client.time.sleep"):
        with pytest.raises(ValidatorError) as exc:
            client.validate("<p>x</p>")

    assert calls == [2, 2]
    assert exc.value.status == 0
    assert "timed out" in str(exc.value)


def test_undecodable_response_is_a_validator_error():
    client = W3CValidatorClient(W3CValidatorConfig())
    with patch("connectors.w3c.client.urlopen", lambda req, timeout=30: _response(b"\xff\xfe{not json")):
        with pytest.raises(ValidatorError) as exc:
            client.validate("<p>x</p>")
    assert exc.value.status == 200
