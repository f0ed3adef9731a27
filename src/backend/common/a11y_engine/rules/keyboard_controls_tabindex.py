from __future__ import annotations

from ..context import RuleContext
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


def parse_tabindex(value) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


@register_rule
class KeyboardControlsTabindex(Rule):
    slug = "keyboard_controls_tabindex"
    title = "Keyboard Accessible: Tabindex"
    description = "The website should also be accessible when using only the keyboard."
    guideline_title = "2.1.1 Keyboard"
    guideline_anchor = "keyboard-operation-keyboard-operable"

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        elements = ctx.dom.find("[tabindex]")
        if not elements:
            outcome.skip(
                "There are no tags with tabindex attributes in the HTML code provided. Therefore this test was skipped."
            )
            return

        for element in elements:
            value = parse_tabindex(element.get_attribute("tabindex"))
            if value > 0:
                outcome.error(
                    "The tabindex attribute of the following element is greater than 0.",
                    "tabindex_greater_than_0",
                    element,
                )
            elif value == -1:
                outcome.warning(
                    "The tabindex attribute of the following element is set to -1, so it can only be "
                    "reached via JavaScript.",
                    "tabindex_minus_1",
                    element,
                )

        outcome.finish("All tags with tabindex attributes in the HTML code use non-problematic values.")
