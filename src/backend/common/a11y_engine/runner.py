from __future__ import annotations

import logging
import threading
import weakref
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .config import RulesConfig
from .context import RuleContext, StoredOptions, Validator
from .errors import CheckNotFoundError, HtmlParseError, PersistenceError, RuleNotFoundError
from .models import Check, CheckCompleted, CheckReport, ResultType, RuleResult
from .parser import Dom
from .registry import registry
from .rule import Rule
from .rules import CATALOG_ORDER
from .storage import Storage

logger = logging.getLogger(__name__)


class RulesRunner:
    """Drives the rule catalog for stored checks, one rule per call.

    Each call to `run_next_test` either returns a result that still needs
    answers (the same rule runs again next time), persists a finished result
    and returns it, or returns `CheckCompleted` once every rule has run.
    """

    def __init__(
        self,
        storage: Storage,
        rules: Optional[Iterable[Rule]] = None,
        validator: Optional[Validator] = None,
        rules_config: Optional[RulesConfig] = None,
    ):
        self._storage = storage
        self._rules: List[Rule] = list(rules) if rules is not None else registry.create_all(CATALOG_ORDER)
        self._order: Dict[str, int] = {rule.slug: idx for idx, rule in enumerate(self._rules)}
        self._validator = validator
        self._rules_config = rules_config or RulesConfig()
        # Entries disappear once no call holds the lock any more.
        self._locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def run_test(
        self,
        check_id: str,
        rule: Union[Rule, str],
        args: Optional[Mapping[str, Any]] = None,
    ) -> RuleResult:
        """Evaluate one rule against a stored check without persisting the result."""
        check = self._get_check(check_id)
        if isinstance(rule, str):
            rule = self._get_rule(rule)
        return rule.evaluate(self._make_context(check), args)

    def run_next_test(
        self,
        check_id: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> Union[RuleResult, CheckCompleted]:
        with self._lock_for(check_id):
            check = self._get_check(check_id)
            results = self._storage.list_results(check_id)
            last = results[-1] if results else None

            if last is None:
                rule = self._rules[0] if self._rules else None
            elif last.is_done():
                rule = self._following(last.test_slug)
            else:
                rule = self._get_rule(last.test_slug)

            if rule is None:
                logger.info("all tests completed for check %s", check_id)
                return CheckCompleted(check_id=check_id)

            logger.debug("running %s for check %s", rule.slug, check_id)
            result = rule.evaluate(self._make_context(check), args)
            if result.is_done():
                self._upsert(check_id, results, result)
            return result

    def summarize(self, check_id: str) -> CheckReport:
        self._get_check(check_id)
        results = self._storage.list_results(check_id)

        totals: Dict[ResultType, int] = {}
        for res in results:
            totals[res.type] = totals.get(res.type, 0) + 1

        finished = {res.test_slug for res in results if res.is_done()}
        return CheckReport(
            check_id=check_id,
            generated_at=datetime.now(timezone.utc),
            complete=all(rule.slug in finished for rule in self._rules),
            results=results,
            totals=totals,
        )

    def _lock_for(self, check_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(check_id)
            if lock is None:
                lock = self._locks[check_id] = threading.Lock()
            return lock

    def _get_check(self, check_id: str) -> Check:
        check = self._storage.get_check(check_id)
        if check is None:
            raise CheckNotFoundError(f"No check exists for ID {check_id}.")
        return check

    def _get_rule(self, slug: str) -> Rule:
        idx = self._order.get(slug)
        if idx is None:
            raise RuleNotFoundError(f"The test {slug} was not found.")
        return self._rules[idx]

    def _following(self, slug: str) -> Optional[Rule]:
        idx = self._order.get(slug)
        if idx is None:
            raise RuleNotFoundError(f"The test {slug} was not found.")
        if idx + 1 >= len(self._rules):
            return None
        return self._rules[idx + 1]

    def _make_context(self, check: Check) -> RuleContext:
        dom = Dom.parse(check.html)
        if dom is None:
            raise HtmlParseError()
        return RuleContext(
            check_id=check.id,
            dom=dom,
            options=StoredOptions(self._storage, check.id),
            url=check.url,
            rules_config=self._rules_config,
            validator=self._validator,
        )

    def _upsert(self, check_id: str, results: List[RuleResult], result: RuleResult) -> None:
        previous = next((res for res in results if res.test_slug == result.test_slug), None)
        if previous is not None:
            stored = self._storage.replace_result(check_id, previous, result)
        else:
            stored = self._storage.append_result(check_id, result)
        if not stored:
            raise PersistenceError("The test result could not be added.", code="result_not_added")
