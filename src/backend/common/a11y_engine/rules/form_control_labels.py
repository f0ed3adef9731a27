from __future__ import annotations

from typing import Optional

from ..context import RuleContext
from ..helpers import find_ancestor
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..parser import Dom, Node
from ..registry import register_rule
from ..rule import Rule

# Inputs labelled by their own value or not rendered at all.
UNLABELLED_INPUT_TYPES = ("hidden", "submit", "reset", "button", "image")
LABEL_AFTER_ALLOWED = ("radio", "checkbox")


def explicit_label(dom: Dom, control: Node) -> Optional[Node]:
    control_id = control.get_attribute("id")
    if not control_id:
        return None
    for label in dom.find("label[for]"):
        if label.get_attribute("for") == control_id:
            return label
    return None


def has_aria_name(control: Node) -> bool:
    return any((control.get_attribute(attr) or "").strip() for attr in ("title", "aria-label", "aria-labelledby"))


@register_rule
class FormControlLabels(Rule):
    slug = "form_control_labels"
    title = "Form Control Labels"
    description = "Labels for form controls must be properly connected to and displayed before their respective control."
    guideline_title = "3.3.2 Labels or Instructions"
    guideline_anchor = "minimize-error-cues"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H44",
            title="Using label elements to associate text labels with form controls",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H65",
            title="Using the title attribute to identify form controls when the label element cannot be used",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H71",
            title="Providing a description for groups of form controls using fieldset and legend elements",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H90",
            title="Indicating required form controls using label or legend",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        controls = [
            control
            for control in ctx.dom.find("input,select,textarea")
            if control.get_tag_name() != "input"
            or (control.get_attribute("type") or "text").lower() not in UNLABELLED_INPUT_TYPES
        ]
        if not controls:
            outcome.skip("There are no form controls in the HTML code provided. Therefore this test was skipped.")
            return

        for control in controls:
            label = explicit_label(ctx.dom, control)
            if label is None:
                if find_ancestor(control, ("label",)) is None and not has_aria_name(control):
                    outcome.error(
                        "The following form control neither is connected to a label element nor provides a "
                        "title or aria-label attribute.",
                        "missing_label",
                        control,
                    )
                continue

            control_type = (control.get_attribute("type") or "").lower()
            if control.get_tag_name() == "input" and control_type in LABEL_AFTER_ALLOWED:
                continue
            if control.precedes(label):
                outcome.error(
                    "The label element for the following form control is incorrectly positioned after it.",
                    "label_position_after_control",
                    control,
                )

        outcome.finish("All form controls in the HTML code have valid labels provided.")
