from __future__ import annotations

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class GraphicalUIAlternativeTextsLinks(Rule):
    slug = "graphical_ui_alternative_texts_links"
    title = "Alternative texts for graphical UI elements: Links"
    description = (
        "Graphical UI elements must have alternative texts. Alternative texts for linked graphics should "
        "describe the link target."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H30",
            title="Providing link text that describes the purpose of a link for anchor elements",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        graphical_links = []
        for image in ctx.dom.find("a > img"):
            link = image.get_parent()
            # Only links whose sole content is the image.
            children = [
                child
                for child in link.get_children(include_text=True)
                if not child.is_text_node() or child.text().strip()
            ]
            if len(children) == 1:
                graphical_links.append((link, image))

        if not graphical_links:
            outcome.skip("There are no graphical links in the HTML code provided. Therefore this test was skipped.")
            return

        for link, image in graphical_links:
            if not link.get_attribute("aria-label") and not (image.get_attribute("alt") or "").strip():
                outcome.error(
                    "The following graphical link is missing an alternative text.",
                    "missing_alternative_text",
                    link,
                )

        outcome.finish("All graphical links in the HTML code have valid alternative texts provided.")
