from __future__ import annotations

from ..context import RuleContext
from ..outcome import RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

SEARCH_NAMES = ("search", "s")


def is_search_form(form: Node) -> bool:
    """A form with a single text input that is named, typed or classed as a search."""
    inputs = [
        field
        for field in form.find("input")
        if (field.get_attribute("type") or "text").lower() not in ("hidden", "submit", "button", "image", "reset")
    ]
    if len(inputs) != 1:
        return False
    field = inputs[0]
    if (field.get_attribute("type") or "").lower() == "search":
        return True
    if field.get_attribute("id") in SEARCH_NAMES or field.get_attribute("name") in SEARCH_NAMES:
        return True
    if "search" in (field.get_attribute("class") or ""):
        return True
    if form.get_attribute("role") == "search" or form.get_attribute("id") in SEARCH_NAMES:
        return True
    return "search" in (form.get_attribute("class") or "")


@register_rule
class MultipleWays(Rule):
    slug = "multiple_ways"
    title = "Multiple ways"
    description = (
        "There must be at least two alternative ways to access content, for example through navigation and search."
    )
    guideline_title = "2.4.5 Multiple Ways"
    guideline_anchor = "navigation-mechanisms-mult-loc"

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        if not any(is_search_form(form) for form in ctx.dom.find("form")):
            outcome.warning(
                "No search form was detected on the page. It is recommended to provide such functionality.",
                "missing_search_form",
            )

        outcome.finish("A search form was successfully detected on the page.")
