from __future__ import annotations

from collections import OrderedDict
from typing import List, Optional

from ..config import StructuralHeadingsRuleConfig
from ..context import RuleContext
from ..helpers import find_ancestor, normalize_text
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

HEADINGS = "h1,h2,h3,h4,h5,h6"
SECTIONING_CONTENT = "section,article,nav,aside"
# Elements that start a new heading scope.
SECTIONING_ROOTS = (
    "body", "main", "blockquote", "figure", "td", "details", "dialog", "fieldset",
    "section", "article", "nav", "aside",
)


def heading_level(heading: Node) -> int:
    return int(heading.get_tag_name()[1])


def incorrect_nesting(headings: List[Node]) -> Optional[str]:
    """Outline of ``headings`` if a level is skipped on the way down, else None."""
    previous = None
    broken = False
    for heading in headings:
        level = heading_level(heading)
        if previous is not None and level > previous + 1:
            broken = True
            break
        previous = level
    if not broken:
        return None
    return "\n".join(f"{h.get_tag_name()}: {normalize_text(h.text())}" for h in headings)


@register_rule
class StructuralHeadings(Rule):
    slug = "structural_headings"
    title = "Structural elements for headings"
    description = (
        "Headings must be marked through the structural HTML elements h1 to h6 and provide a quick "
        "overview of the page contents."
    )
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H42", title="Using h1-h6 to identify headings"),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H69",
            title="Providing heading elements at the beginning of each section of content",
        ),
    )
    config_model = StructuralHeadingsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        headings = ctx.dom.find(HEADINGS)
        if not headings:
            outcome.warning(
                "There are no headings in the HTML code provided. Headings should be used to give your page "
                "an easily understandable structure.",
                "no_headings_in_content",
            )
            outcome.finish("")
            return

        sectioning = ctx.dom.find(SECTIONING_CONTENT)
        if not sectioning:
            outline = incorrect_nesting(headings)
            if outline:
                outcome.warning(
                    "The following headings are nested incorrectly.",
                    "headings_nested_incorrectly_no_sectioning_content",
                    snippet=outline,
                )
        else:
            groups: "OrderedDict[str, List[Node]]" = OrderedDict()
            for heading in headings:
                root = find_ancestor(heading, SECTIONING_ROOTS)
                group = root.get_node_path() if root is not None else "global"
                groups.setdefault(group, []).append(heading)

            for group_headings in groups.values():
                outline = incorrect_nesting(group_headings)
                if outline:
                    outcome.warning(
                        "The following headings are nested incorrectly.",
                        "headings_nested_incorrectly_sectioning_content",
                        snippet=outline,
                    )

            h1_count = sum(1 for h in headings if h.get_tag_name() == "h1")
            articles = ctx.dom.find("article")
            multiple_areas = (
                len(articles) >= cfg.min_articles_for_multiple_areas
                or len(sectioning) > cfg.max_sectioning_elements_for_single_area
            )
            if h1_count > 1 and multiple_areas:
                outcome.error(
                    "There is more than one h1 heading in the page although it contains several separate "
                    "areas of content. Use a single h1 for the page and lower heading levels for each area.",
                    "multiple_h1_headings",
                )

        outcome.finish(
            "The heading structure and resulting document outline of the HTML code appears to be correct."
        )
