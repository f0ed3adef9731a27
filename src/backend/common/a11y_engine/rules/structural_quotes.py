from __future__ import annotations

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class StructuralQuotes(Rule):
    slug = "structural_quotes"
    title = "Structural elements for quotes"
    description = "Quotes that are their own paragraph should be marked with the structural HTML element blockquote."
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H49",
            title="Using semantic markup to mark emphasized or special text",
        ),
    )
    may_request_data = True

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        if not ctx.dom.find("blockquote"):
            has_blockquotes = self.get_option(ctx, "has_blockquotes")
            if not has_blockquotes:
                outcome.ask(
                    "has_blockquotes",
                    "Quotes available",
                    description="Specify whether the page contains quotes which are their own paragraph.",
                    options=YES_NO,
                    default="yes",
                )
            elif has_blockquotes == "yes":
                outcome.error(
                    "The page contains quotes that do not use proper blockquote markup.",
                    "error_missing_blockquote_markup_for_quotes",
                )
            else:
                outcome.skip("There are no quotes in the HTML code provided. Therefore this test was skipped.")
                return

        outcome.finish("All quotes in the HTML code use proper blockquote markup.")
