from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..helpers import node_identifier, sanitize_src, split_tokens
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

NO_TARGET = "NONE"


def find_targets(root: Node, token: str) -> List[Node]:
    """Elements a controls token points at.

    ``.name`` tokens match a class, ``#name`` and bare tokens match an id.
    Values are compared as-is, so ids like ``:r1:`` or ``menu.main`` work.
    """
    if token.startswith("."):
        name = token[1:]
        return [node for node in root.find("[class]") if name in split_tokens(node.get_attribute("class"))]
    name = token[1:] if token.startswith("#") else token
    return [node for node in root.find("[id]") if node.get_attribute("id") == name]


def is_element_following(button: Node, targets: List[Node]) -> bool:
    following = button.get_next()
    if following is None:
        parent = button.get_parent()
        following = parent.get_next() if parent is not None else None
    if following is None:
        return False
    return any(following.contains(target) for target in targets)


@register_rule
class DynamicallyInsertedContent(Rule):
    slug = "dynamically_inserted_content"
    title = "Dynamically inserted content"
    description = (
        "Content that is dynamically added (for example through AJAX) should appear at a relevant position "
        "in the page."
    )
    guideline_title = "1.3.2 Meaningful Sequence"
    guideline_anchor = "content-structure-separation-sequence"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/SCR21",
            title="Using functions of the Document Object Model (DOM) to add content to a page",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/SCR26",
            title="Inserting dynamic content into the Document Object Model immediately following its trigger element",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/SCR37",
            title="Creating Custom Dialogs in a Device Independent Way",
        ),
    )
    may_request_data = True

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        found = False
        for button in ctx.dom.find("button"):
            if button.get_attribute("type") == "submit":
                continue
            identifier = node_identifier(button)
            targets = self._controlled_targets(ctx, outcome, button, identifier)
            if not targets:
                continue
            found = True

            if not button.get_attribute("aria-controls"):
                outcome.warning(
                    "The following button controls dynamic content but does not declare it through aria-controls.",
                    "missing_aria_controls",
                    button,
                )

            for token in targets:
                name = token.lstrip("#")
                found_targets = find_targets(ctx.dom, token)
                if not found_targets:
                    outcome.error(
                        f"The element {name} does not exist although it is controlled by the following button.",
                        "controlled_element_not_found",
                        button,
                    )
                    continue
                if is_element_following(button, found_targets):
                    continue

                key = f"valid_focus_change_{identifier}_for_id_{sanitize_src(name.lstrip('.'))}"
                answer = self.get_option(ctx, key)
                if not answer:
                    outcome.ask(
                        key,
                        "Focus Change",
                        description=(
                            f"Is the focus for the element {name} adjusted accordingly when it is toggled by "
                            f"the button in line {button.get_line_no()}?"
                        ),
                        options=YES_NO,
                        default="no",
                    )
                elif answer == "no":
                    outcome.error(
                        f"The focus for the element {name} is not adjusted accordingly when it is toggled by "
                        "the following button.",
                        "focus_not_adjusted",
                        button,
                    )

        if not found and not outcome.request_data:
            outcome.skip("No dynamic content was detected in the HTML code provided. Therefore this test was skipped.")
            return

        outcome.finish("All detected dynamic content is added properly.")

    def _controlled_targets(
        self, ctx: RuleContext, outcome: RuleOutcome, button: Node, identifier: str
    ) -> List[str]:
        for attr in ("aria-controls", "data-target"):
            value = button.get_attribute(attr)
            if value and value.strip():
                return split_tokens(value)

        key = "button_controlled_ids_" + identifier
        answer = self.get_option(ctx, key)
        if not answer:
            outcome.ask(
                key,
                "Controlled Elements",
                description=(
                    f"If the button in line {button.get_line_no()} controls one or more specific elements, "
                    f'provide the element IDs, separated by a space. If the button is used for something else, '
                    f'enter "{NO_TARGET}".'
                ),
                default=NO_TARGET,
                type="text",
            )
            return []
        if str(answer).strip().upper() == NO_TARGET:
            return []
        return split_tokens(str(answer))
