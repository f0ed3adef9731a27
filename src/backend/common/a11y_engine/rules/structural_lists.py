from __future__ import annotations

from ..config import StructuralListsRuleConfig
from ..context import RuleContext
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class StructuralLists(Rule):
    slug = "structural_lists"
    title = "Structural elements for lists"
    description = "Valid list markup, such as ul, ol and dl, should be used for lists on the page."
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H48",
            title="Using ol, ul and dl for lists or groups of links",
        ),
    )
    may_request_data = True
    config_model = StructuralListsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        lists = ctx.dom.find("ul,ol,dl")
        navs = ctx.dom.find("nav")

        if not lists:
            has_lists = self.get_option(ctx, "has_lists")
            if not has_lists:
                outcome.ask(
                    "has_lists",
                    "Lists available",
                    description="Specify whether the page contains lists.",
                    options=YES_NO,
                    default="yes",
                )
            elif has_lists == "yes":
                outcome.error(
                    "The page contains lists that do not use proper list markup.",
                    "missing_list_markup",
                )
            elif not navs:
                outcome.skip("There are no lists in the HTML code provided. Therefore this test was skipped.")
                return

        for nav in navs:
            links = nav.find("a")
            if len(links) > cfg.max_nav_links_without_list and nav.find("ul,ol", single=True) is None:
                outcome.error(
                    f"The following menu does not use list markup although it contains more than "
                    f"{cfg.max_nav_links_without_list} links.",
                    "missing_list_markup_for_navigation",
                    nav,
                )

        outcome.finish("All lists in the HTML code use proper list markup.")
