from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Sequence, Type

from .config import RuleConfigBase
from .context import RuleContext
from .errors import PersistenceError
from .models import ResultType, RuleLink, RuleResult
from .outcome import RuleOutcome

logger = logging.getLogger(__name__)


class Rule(ABC):
    slug: str
    title: str
    description: str = ""
    guideline_title: str = ""
    guideline_anchor: str = ""
    links: Sequence[RuleLink] = ()
    may_request_data: bool = False
    config_model: Type[RuleConfigBase] = RuleConfigBase

    def __init__(self):
        if not getattr(self, "slug", None):
            raise ValueError("Rule must define slug")

    def evaluate(self, ctx: RuleContext, args: Optional[Mapping[str, Any]] = None) -> RuleResult:
        """Run this rule once against ``ctx``.

        Answers in ``args`` are stored in the check's options before the rule
        runs and stay stored whatever happens afterwards. A run that still has
        open questions is reported as ``info`` with only the questions.
        """
        if args:
            self.store_answers(ctx, args)

        outcome = RuleOutcome()
        cfg = self.get_config(ctx)
        if not cfg.enabled:
            outcome.skip("This test is disabled by configuration.")
            outcome.message_codes = ["disabled"]
        else:
            self.run(ctx, outcome)

        if outcome.request_data:
            outcome.type = ResultType.INFO
            outcome.messages = []
            outcome.message_codes = []

        return RuleResult(
            test_slug=self.slug,
            test_title=self.title,
            test_description=self.description,
            test_guideline_title=self.guideline_title,
            test_guideline_anchor=self.guideline_anchor,
            test_links=list(self.links),
            check_id=ctx.check_id,
            type=outcome.type,
            messages=outcome.messages,
            message_codes=outcome.message_codes,
            request_data=[
                req.model_copy(update={"slug": self.option_key(req.slug)}) for req in outcome.request_data
            ],
        )

    @abstractmethod
    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:  # pragma: no cover
        raise NotImplementedError

    def get_config(self, ctx: RuleContext):
        return ctx.rules_config.get_rule_config(self.slug, self.config_model)

    def option_key(self, name: str) -> str:
        prefix = f"{self.slug}_"
        return name if name.startswith(prefix) else prefix + name

    def get_option(self, ctx: RuleContext, name: str) -> Any:
        return ctx.options.get(self.option_key(name))

    def get_global_option(self, ctx: RuleContext, name: str) -> Any:
        return ctx.options.get(f"global_{name}")

    def store_answers(self, ctx: RuleContext, args: Mapping[str, Any]) -> Dict[str, Any]:
        stored: Dict[str, Any] = {}
        for key, value in args.items():
            name = self.option_key(key)
            if isinstance(value, (list, tuple, set)):
                existing = ctx.options.get(name)
                merged = list(existing) if isinstance(existing, list) else []
                merged.extend(v for v in value if v not in merged)
                value = merged
            if not ctx.options.set(name, value):
                raise PersistenceError(f"The answer for {key} could not be saved.", code="option_not_saved")
            stored[name] = value
        logger.debug("stored %d answer(s) for %s on check %s", len(stored), self.slug, ctx.check_id)
        return stored
