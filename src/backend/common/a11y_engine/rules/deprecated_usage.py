from __future__ import annotations

from typing import Dict, Tuple

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

DEPRECATED_TAGS: Tuple[str, ...] = (
    "applet", "basefont", "blink", "center", "dir", "font", "isindex", "marquee", "menu", "s", "strike", "u",
)

DEPRECATED_ATTRIBUTES: Tuple[str, ...] = (
    "alink", "background", "bgcolor", "clear", "compact", "hspace", "language", "link", "noshade", "nowrap",
    "prompt", "start", "text", "version", "vlink", "vspace",
)

# Attribute -> tags it must not be used with.
DEPRECATED_ATTRIBUTE_BLACKLIST: Dict[str, Tuple[str, ...]] = {
    "border": ("img", "object"),
    "height": ("th", "td"),
    "size": ("hr",),
    "type": ("li", "ol", "ul"),
    "value": ("li",),
    "width": ("hr", "th", "td", "pre"),
}

# Attribute -> the only tags it may still be used with.
DEPRECATED_ATTRIBUTE_WHITELIST: Dict[str, Tuple[str, ...]] = {
    "align": ("col", "colgroup", "tbody", "td", "tfoot", "th", "thead", "tr"),
}


@register_rule
class DeprecatedUsage(Rule):
    slug = "deprecated_usage"
    title = "Avoiding Usage of Deprecated Elements and Attributes"
    description = (
        "Elements and attributes that have been deprecated since HTML 4.01 or have never been part of any "
        "specification must not be used."
    )
    guideline_title = "4.1.1 Parsing"
    guideline_anchor = "ensure-compat-parses"
    links = (RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H88", title="Using HTML according to spec"),)

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        for element in ctx.dom.find(",".join(DEPRECATED_TAGS)):
            outcome.error(
                f"The deprecated tag {element.get_tag_name()} is used in line {element.get_line_no()}.",
                "deprecated_tag",
                element,
            )

        for attribute in DEPRECATED_ATTRIBUTES:
            for element in ctx.dom.find(f"[{attribute}]"):
                outcome.error(
                    f"The deprecated attribute {attribute} is used in line {element.get_line_no()}.",
                    "deprecated_attribute",
                    element,
                )

        for attribute, tags in DEPRECATED_ATTRIBUTE_BLACKLIST.items():
            for element in ctx.dom.find(",".join(f"{tag}[{attribute}]" for tag in tags)):
                self._deprecated_with_tag(outcome, attribute, element)

        for attribute, tags in DEPRECATED_ATTRIBUTE_WHITELIST.items():
            for element in ctx.dom.find(f"[{attribute}]"):
                if element.get_tag_name() not in tags:
                    self._deprecated_with_tag(outcome, attribute, element)

        outcome.finish("No usage of deprecated tags or attributes was found.")

    def _deprecated_with_tag(self, outcome: RuleOutcome, attribute: str, element) -> None:
        outcome.error(
            f"The attribute {attribute} is deprecated with the tag {element.get_tag_name()}, but used that way "
            f"in line {element.get_line_no()}.",
            "deprecated_attribute_with_tag",
            element,
        )
