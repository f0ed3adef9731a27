from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List

from ..context import RuleContext
from ..helpers import split_tokens
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule


def is_icon(italic: Node, iconfont_prefixes: List[str]) -> bool:
    if italic.has_attribute("aria-hidden") or not italic.text().strip():
        return True
    classes = italic.get_attribute("class") or ""
    return any(prefix in classes for prefix in iconfont_prefixes)


def group_controls(controls: List[Node]) -> Dict[str, List[Node]]:
    """Group form controls by their container, looking through a wrapping label."""
    groups: "OrderedDict[str, List[Node]]" = OrderedDict()
    for control in controls:
        parent = control.get_parent()
        if parent is not None and parent.get_tag_name() == "label":
            parent = parent.get_parent() or parent
        key = parent.get_node_path() if parent is not None else ""
        groups.setdefault(key, []).append(control)
    return groups


@register_rule
class OrganizedContent(Rule):
    slug = "organized_content"
    title = "Organized Content"
    description = (
        "Paragraphs and groups of form controls must be marked by appropriate structural HTML elements. "
        "To highlight parts of text, strong or em must be used."
    )
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H49", title="Using semantic markup to mark emphasized or special text"),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H71",
            title="Providing a description for groups of form controls using fieldset and legend elements",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        self._check_breaks(ctx, outcome)

        for bold in ctx.dom.find("b"):
            outcome.error(
                "The following content is highlighted using the old b tag and thus should use strong instead.",
                "misuse_of_b_tag",
                bold,
            )

        iconfont_prefixes = split_tokens(self.get_global_option(ctx, "iconfont"))
        for italic in ctx.dom.find("i"):
            if is_icon(italic, iconfont_prefixes):
                continue
            outcome.error(
                "The following content is highlighted using the old i tag and thus should use em instead.",
                "misuse_of_i_tag",
                italic,
            )

        for form in ctx.dom.find("form"):
            if form.find("fieldset"):
                continue
            self._check_group(outcome, form.find('input[type="radio"]'), "radio buttons", "missing_fieldset_for_radio_group")
            self._check_group(
                outcome, form.find('input[type="checkbox"]'), "checkboxes", "missing_fieldset_for_checkbox_group"
            )

        outcome.finish("No invalid usages of tags or lack of structure have been found.")

    def _check_breaks(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        for last_break in ctx.dom.find("br"):
            previous = last_break.get_previous(include_text=True)
            while previous is not None and previous.is_text_node() and not previous.text().strip():
                previous = previous.get_previous(include_text=True)
            if previous is None or previous.is_text_node() or previous.get_tag_name() != "br":
                continue
            outcome.error(
                "Actual paragraph markup must be used instead of the following occurrence of two br tags.",
                "misuse_of_br_tag",
                previous,
                snippet=previous.outer_html() + last_break.outer_html(),
            )

    def _check_group(self, outcome: RuleOutcome, controls: List[Node], label: str, code: str) -> None:
        for group in group_controls(controls).values():
            if len(group) <= 1:
                continue
            outcome.error(
                f"The following set of {label} should be properly grouped using fieldset.",
                code,
                group[0],
                snippet="\n".join(control.outer_html() for control in group),
            )
