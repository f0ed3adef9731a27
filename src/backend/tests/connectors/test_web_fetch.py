from http.client import RemoteDisconnected
from unittest.mock import Mock, patch
from urllib.error import HTTPError, URLError

import pytest

from connectors.web.config import WebFetchConfig, get_fetch_config
from connectors.web.fetch import FetchError, fetch_html


def _response(body: bytes, charset: str | None = "utf-8") -> Mock:
    response = Mock()
    response.read.return_value = body
    response.headers.get_content_charset.return_value = charset
    response.__enter__ = Mock(return_value=response)
    response.__exit__ = Mock(return_value=False)
    return response


def test_fetch_sends_headers_and_decodes_charset():
    captured = {}

    def _fake_urlopen(req, timeout=30):
        captured["url"] = req.full_url
        captured["agent"] = req.get_header("User-agent")
        captured["timeout"] = timeout
        return _response("<title>Café</title>".encode("latin-1"), charset="latin-1")

    cfg = WebFetchConfig(timeout_seconds=5, user_agent="tester/1.0")
    with patch("connectors.web.fetch.urlopen", _fake_urlopen):
        html = fetch_html("https://example.com/page", cfg)

    assert html == "<title>Café</title>"
    assert captured == {"url": "https://example.com/page", "agent": "tester/1.0", "timeout": 5}


def test_fetch_retries_transient_errors():
    calls = []

    def _fake_urlopen(req, timeout=30):
        calls.append(req.full_url)
        if len(calls) == 1:
            raise HTTPError(req.full_url, 503, "Service Unavailable", {}, None)
        if len(calls) == 2:
            raise URLError("connection reset")
        return _response(b"<p>ok</p>", charset=None)

    with patch("connectors.web.fetch.urlopen", _fake_urlopen), patch("connectors.web.fetch.time.sleep") as sleep:
        html = fetch_html("https://example.com/", WebFetchConfig(max_retries=2))

    assert html == "<p>ok</p>"
    assert len(calls) == 3
    assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]


def test_fetch_raises_on_client_errors_without_retry():
    def _fake_urlopen(req, timeout=30):
        raise HTTPError(req.full_url, 404, "Not Found", {}, None)

    with patch("connectors.web.fetch.urlopen", _fake_urlopen):
        with pytest.raises(FetchError) as exc:
            fetch_html("https://example.com/missing", WebFetchConfig())
    assert exc.value.status == 404


def test_fetch_rejects_empty_bodies_and_other_schemes():
    with patch("connectors.web.fetch.urlopen", lambda req, timeout=30: _response(b"  \n")):
        with pytest.raises(FetchError) as exc:
            fetch_html("https://example.com/", WebFetchConfig())
    assert exc.value.status == 200

    with pytest.raises(FetchError) as exc:
        fetch_html("file:///etc/passwd", WebFetchConfig())
    assert exc.value.status == 0


def test_fetch_config_from_env(monkeypatch):
    monkeypatch.setenv("A11Y_FETCH_TIMEOUT_SECONDS", "7")
    monkeypatch.setenv("A11Y_FETCH_USER_AGENT", "agent")
    monkeypatch.setenv("A11Y_FETCH_MAX_RETRIES", "0")
    assert get_fetch_config() == WebFetchConfig(timeout_seconds=7, user_agent="agent", max_retries=0)

    monkeypatch.setenv("A11Y_FETCH_MAX_RETRIES", "-1")
    with pytest.raises(ValueError):
        get_fetch_config()


def test_fetch_timeouts_are_retried_then_raised_as_fetch_error():
    calls = []

    def _fake_urlopen(req, timeout=30):
        calls.append(req.full_url)
        if len(calls) == 1:
            raise ConnectionResetError("connection reset by peer")
        if len(calls) == 2:
            raise RemoteDisconnected("Remote end closed connection without response")
        raise TimeoutError("timed out")

    with patch("connectors.web.fetch.urlopen", _fake_urlopen), patch("connectors.web.fetch.time.sleep"):
        with pytest.raises(FetchError) as exc:
            fetch_html("https://slow.example.com/", WebFetchConfig(max_retries=2))

    assert len(calls) == 3
    assert exc.value.status == 0
    assert "timed out" in str(exc.value)


def test_fetch_timeout_while_reading_body():
    response = _response(b"")
    response.read.side_effect = TimeoutError("timed out")
    with patch("connectors.web.fetch.urlopen", lambda req, timeout=30: response):
        with pytest.raises(FetchError):
            fetch_html("https://slow.example.com/", WebFetchConfig(max_retries=0))


def test_fetch_falls_back_to_utf8_for_unknown_charsets():
    with patch("connectors.web.fetch.urlopen", lambda req, timeout=30: _response(b"<p>ok</p>", charset="x-bogus")):
        assert fetch_html("https://example.com/", WebFetchConfig()) == "<p>ok</p>"
