from __future__ import annotations

import logging
from typing import List

from ..config import ValidHtmlRuleConfig
from ..context import RuleContext
from ..errors import ValidatorUnavailableError
from ..helpers import slugify_message
from ..models import RuleLink, ValidatorIssue
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

logger = logging.getLogger(__name__)


@register_rule
class ValidHtml(Rule):
    slug = "valid_html"
    title = "Valid HTML"
    description = "HTML markup must be used correctly."
    guideline_title = "4.1.1 Parsing"
    guideline_anchor = "ensure-compat-parses"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H74",
            title="Ensuring that opening and closing tags are used according to specification",
        ),
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H75", title="Ensuring that Web pages are well-formed"),
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H88", title="Using HTML according to spec"),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H93",
            title="Ensuring that id attributes are unique on a Web page",
        ),
    )
    config_model = ValidHtmlRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        if ctx.dom.get_document_type() == "unknown":
            outcome.error("No doctype has been declared for the page.", "error_missing_doctype")
            return

        cfg = self.get_config(ctx)
        for issue in self._issues(ctx):
            if any(pattern in issue.message for pattern in cfg.ignored_message_patterns):
                continue
            if issue.type == "info" and issue.sub_type == "warning":
                outcome.warning(
                    issue.message,
                    slugify_message(issue.message, "warning"),
                    snippet=issue.extract,
                    line=issue.last_line,
                )
            elif issue.type == "error":
                outcome.error(
                    issue.message,
                    slugify_message(issue.message, "error"),
                    snippet=issue.extract,
                    line=issue.last_line,
                )

        outcome.finish("No invalid usage of HTML code was detected.")

    def _issues(self, ctx: RuleContext) -> List[ValidatorIssue]:
        if ctx.validator is None:
            logger.warning("validator unavailable: none configured for check %s", ctx.check_id)
            return []
        try:
            issues = ctx.validator.validate(ctx.dom.source)
        except ValidatorUnavailableError as exc:
            logger.warning("validator unavailable for check %s: %s", ctx.check_id, exc)
            return []
        if not issues:
            logger.debug("validator reported no issues for check %s", ctx.check_id)
        return issues
