import logging
from unittest.mock import patch

from common.a11y_engine.errors import ValidatorUnavailableError
from common.a11y_engine.models import ResultType, ValidatorIssue
from common.a11y_engine.rules.valid_html import ValidHtml
from connectors.w3c.client import W3CValidatorClient
from connectors.w3c.config import W3CValidatorConfig

DOC = "<!DOCTYPE html>\n<html lang=\"en\"><head><title>x</title></head>\n<body><p>x</p></div></body></html>"


def test_missing_doctype_fails_without_calling_validator(make_ctx, stub_validator):
    validator = stub_validator()
    res = ValidHtml().evaluate(make_ctx("<p>x</p>", validator=validator))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["error_missing_doctype"]
    assert validator.calls == []


def test_validator_issues_become_messages(make_ctx, stub_validator):
    validator = stub_validator(
        issues=[
            ValidatorIssue(type="error", message="Stray end tag “div”.", extract="</div>", last_line=3),
            ValidatorIssue(
                type="info",
                sub_type="warning",
                message="The “type” attribute is unnecessary for JavaScript resources.",
                extract="<script type>",
                last_line=2,
            ),
            ValidatorIssue(type="info", message="Trailing slash on void elements has no effect."),
            ValidatorIssue(
                type="error",
                message="An “img” element must have an “alt” attribute, except under certain conditions.",
            ),
        ]
    )
    res = ValidHtml().evaluate(make_ctx(DOC, validator=validator))
    assert validator.calls == [DOC]
    assert res.type == ResultType.ERROR
    assert res.message_codes == [
        "error_stray_end_tag_div",
        "warning_the_type_attribute_is_unnecessary_for_javascript_resources",
    ]
    assert res.messages[0].line == 3
    assert res.messages[0].code == "</div>"


def test_warnings_only(make_ctx, stub_validator):
    validator = stub_validator(
        issues=[ValidatorIssue(type="info", sub_type="warning", message="Consider adding a “lang” attribute.")]
    )
    res = ValidHtml().evaluate(make_ctx(DOC, validator=validator))
    assert res.type == ResultType.WARNING


def test_unavailable_validator_degrades_to_success(make_ctx, stub_validator, caplog):
    validator = stub_validator(error=ValidatorUnavailableError("timed out"))
    res = ValidHtml().evaluate(make_ctx(DOC, validator=validator))
    assert res.type == ResultType.SUCCESS
    assert "validator unavailable" in caplog.text


def test_validator_timeout_degrades_to_success(make_ctx, caplog):
    def _timeout(req, timeout=30):
        raise TimeoutError("timed out")

    client = W3CValidatorClient(W3CValidatorConfig(url="http://127.0.0.1:9/", timeout_seconds=1, max_retries=0))
    with patch("connectors.w3c.client.urlopen", _timeout):
        res = ValidHtml().evaluate(make_ctx(DOC, validator=client))
    assert res.type == ResultType.SUCCESS
    assert res.message_codes == ["success"]
    assert "validator unavailable" in caplog.text


def test_missing_validator_degrades_to_success(make_ctx, caplog):
    res = ValidHtml().evaluate(make_ctx(DOC))
    assert res.type == ResultType.SUCCESS
    assert "validator unavailable" in caplog.text


def test_clean_report_is_logged_distinctly(make_ctx, stub_validator, caplog):
    caplog.set_level(logging.DEBUG, logger="common.a11y_engine.rules.valid_html")
    res = ValidHtml().evaluate(make_ctx(DOC, validator=stub_validator()))
    assert res.type == ResultType.SUCCESS
    assert "validator reported no issues" in caplog.text
    assert "validator unavailable" not in caplog.text
