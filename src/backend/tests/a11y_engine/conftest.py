import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from typing import List

import pytest

from common.a11y_engine.config import RulesConfig
from common.a11y_engine.context import DictOptions, RuleContext
from common.a11y_engine.models import ValidatorIssue
from common.a11y_engine.parser import Dom


class StubValidator:
    def __init__(self, issues: List[ValidatorIssue] | None = None, error: Exception | None = None):
        self.issues = issues or []
        self.error = error
        self.calls: List[str] = []

    def validate(self, html: str) -> List[ValidatorIssue]:
        self.calls.append(html)
        if self.error is not None:
            raise self.error
        return list(self.issues)


@pytest.fixture
def make_dom():
    def _make(html: str) -> Dom:
        dom = Dom.parse(html)
        assert dom is not None
        return dom

    return _make


@pytest.fixture
def make_ctx(make_dom):
    def _make(
        html: str,
        *,
        options: dict | None = None,
        rules: dict | None = None,
        url: str | None = None,
        validator=None,
    ) -> RuleContext:
        return RuleContext(
            check_id="check-1",
            dom=make_dom(html),
            options=DictOptions(dict(options or {})),
            url=url,
            rules_config=RulesConfig(rules=rules or {}),
            validator=validator,
        )

    return _make


@pytest.fixture
def stub_validator():
    return StubValidator
