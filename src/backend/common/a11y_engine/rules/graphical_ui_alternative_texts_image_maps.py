from __future__ import annotations

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class GraphicalUIAlternativeTextsImageMaps(Rule):
    slug = "graphical_ui_alternative_texts_image_maps"
    title = "Alternative texts for graphical UI elements: Image Maps"
    description = (
        "Graphical UI elements must have alternative texts. All the area tags of image maps need to "
        "provide helpful alternative texts."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H24",
            title="Providing text alternatives for the area elements of image maps",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        areas = ctx.dom.find("map area")
        if not areas:
            outcome.skip("There are no image maps in the HTML code provided. Therefore this test was skipped.")
            return

        for area in areas:
            if not (area.get_attribute("alt") or "").strip():
                outcome.error(
                    "The following area tag of an image map is missing an alternative text.",
                    "missing_alternative_text",
                    area,
                )

        outcome.finish("All image maps in the HTML code have valid alternative texts provided.")
