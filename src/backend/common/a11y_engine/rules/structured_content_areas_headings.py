from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..parser import Dom, Node
from ..registry import register_rule
from ..rule import Rule

LANDMARK_SELECTOR = "section,article,nav,aside,main"
HEADING_SELECTOR = "h1,h2,h3,h4,h5,h6"


def find_skip_links(dom: Dom) -> List[Node]:
    """Explicit ``a.skip-link`` elements, else the leading run of fragment links."""
    skip_links = dom.find("a.skip-link")
    if skip_links:
        return skip_links

    leading: List[Node] = []
    for link in dom.find("a[href]"):
        if not (link.get_attribute("href") or "").startswith("#"):
            break
        leading.append(link)
    return leading


@register_rule
class StructuredContentAreasHeadings(Rule):
    slug = "structured_content_areas_headings"
    title = "Structured Content Areas: Headings"
    description = (
        "Different content areas, such as navigation, search or main content, should have section headings "
        "or be reachable through skip links."
    )
    guideline_title = "2.4.1 Bypass Blocks"
    guideline_anchor = "navigation-mechanisms-skip"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H42", title="Using h1-h6 to identify headings"),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H69",
            title="Providing heading elements at the beginning of each section of content",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        landmarks = ctx.dom.find(LANDMARK_SELECTOR)
        if not landmarks:
            outcome.skip(
                "There are no sectioning content tags in the HTML code provided. Therefore this test was skipped."
            )
            return

        skip_targets = {link.get_attribute("href") for link in find_skip_links(ctx.dom)}
        for landmark in landmarks:
            if landmark.find(HEADING_SELECTOR, single=True):
                continue
            landmark_id = landmark.get_attribute("id")
            if landmark_id and f"#{landmark_id}" in skip_targets:
                continue
            outcome.error(
                f"The {landmark.get_tag_name()} in line {landmark.get_line_no()} has neither a heading nor a "
                "skip link leading to it.",
                "missing_heading_or_skip_link",
                landmark,
                snippet="",
            )

        outcome.finish("All sectioning content tags in the HTML code have valid headings or skip links provided.")
