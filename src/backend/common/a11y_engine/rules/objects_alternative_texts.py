from __future__ import annotations

from ..config import ObjectsAlternativeTextsRuleConfig
from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ObjectsAlternativeTexts(Rule):
    slug = "objects_alternative_texts"
    title = "Alternative texts for objects"
    description = (
        "Embedded multimedia objects should have alternative content. If using an alternative text, it "
        "should at least provide a description of the content."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H53", title="Using the body of the object element"),
    )
    config_model = ObjectsAlternativeTextsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        objects = ctx.dom.find("object,embed")
        if not objects:
            outcome.skip("There are no objects in the HTML code provided. Therefore this test was skipped.")
            return

        for obj in objects:
            # <param> only configures the object, it is not alternative content.
            children = [
                child
                for child in obj.get_children(include_text=True)
                if (child.is_text_node() and child.text().strip())
                or (not child.is_text_node() and child.get_tag_name() != "param")
            ]
            if not children:
                outcome.error(
                    "The following object does not have any alternative content.",
                    "missing_alternative_content",
                    obj,
                )
                continue

            if len(children) != 1 or children[0].is_text_node():
                continue
            alternative = children[0]
            if alternative.get_tag_name() != "img":
                continue

            alt = (alternative.get_attribute("alt") or "").strip()
            src = alternative.get_attribute("src") or ""
            if not alt:
                outcome.error(
                    "The following object uses an image as alternative content which however does not "
                    "provide an alternative text itself.",
                    "missing_alt_attribute",
                    obj,
                )
            elif src and alt in src:
                outcome.error(
                    "The following object uses an image as alternative which itself seems to have an "
                    "auto-generated alt attribute.",
                    "alt_attribute_part_of_src",
                    obj,
                )
            elif len(alt) > cfg.max_alt_length:
                outcome.error(
                    "The following object uses an image as alternative which itself uses a very long alt "
                    "attribute.",
                    "alternative_text_too_long",
                    obj,
                )

        outcome.finish("All objects in the HTML code have valid alternatives provided.")
