from __future__ import annotations

import re

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

# Characters used to fake an option hierarchy: nbsp, arrows, ">", "-" and "_".
GROUP_INDICATOR_RE = re.compile("^[\xa0\u2192\u21d2>\\-_]")


@register_rule
class OrganizedSelectLists(Rule):
    slug = "organized_select_lists"
    title = "Organized Select Lists"
    description = (
        "Any select lists that use groups to separate their options must use optgroup to do so. "
        "Typographic characters must not be used to indicate groups."
    )
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H85",
            title="Using OPTGROUP to group OPTION elements inside a SELECT",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        selects = ctx.dom.find("select")
        if not selects:
            outcome.skip("There are no select lists in the HTML code provided. Therefore this test was skipped.")
            return

        for select in selects:
            if select.find("optgroup"):
                continue
            if any(GROUP_INDICATOR_RE.match(option.text()) for option in select.find("option")):
                outcome.error(
                    "The following select list uses typographic characters to indicate groups.",
                    "missing_optgroup_tag",
                    select,
                )

        outcome.finish("All select lists in the HTML code use valid markup.")
