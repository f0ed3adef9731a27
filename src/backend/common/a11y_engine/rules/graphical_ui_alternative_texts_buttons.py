from __future__ import annotations

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class GraphicalUIAlternativeTextsButtons(Rule):
    slug = "graphical_ui_alternative_texts_buttons"
    title = "Alternative texts for graphical UI elements: Buttons"
    description = (
        "Graphical UI elements must have alternative texts. Alternative texts for buttons should describe "
        "the action they trigger."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H36",
            title="Using alt attributes on images used as submit buttons",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        buttons = ctx.dom.find('input[type="image"]')
        if not buttons:
            outcome.skip("There are no graphical buttons in the HTML code provided. Therefore this test was skipped.")
            return

        for button in buttons:
            alt = (button.get_attribute("alt") or "").strip()
            src = button.get_attribute("src") or ""
            if not alt:
                outcome.error(
                    "The following graphical button is missing an alternative text.",
                    "missing_alternative_text",
                    button,
                )
            elif src and alt in src:
                outcome.error(
                    "The following graphical button seems to have an auto-generated alt attribute. "
                    "Alt attributes should describe the action in clear human language.",
                    "alt_attribute_part_of_src",
                    button,
                )

        outcome.finish("All graphical buttons in the HTML code have valid alternative texts provided.")
