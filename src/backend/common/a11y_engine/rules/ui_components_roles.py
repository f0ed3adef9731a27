from __future__ import annotations

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class UIComponentsRoles(Rule):
    slug = "ui_components_roles"
    title = "Proper Roles for UI Components"
    description = (
        "In case non-semantic elements are used as buttons or other interface components, they should have "
        "proper role attributes."
    )
    guideline_title = "4.1.2 Name, Role, Value"
    guideline_anchor = "ensure-compat-rsv"
    links = (RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H91", title="Using HTML form controls and links"),)

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        links = ctx.dom.find('a[href="#"]')
        if not links:
            outcome.skip(
                "There are no non-semantically used a tags in the HTML code provided. Therefore this test was skipped."
            )
            return

        for link in links:
            if not (link.get_attribute("role") or "").strip():
                outcome.error(
                    "The following non-semantically used a tag is missing a role attribute.",
                    "missing_role_attribute",
                    link,
                )

        outcome.finish("All non-semantically used a tags in the HTML code have valid role attributes provided.")
