from __future__ import annotations

import re

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

REPEATED_NBSP_RE = re.compile("\xa0{2,}")
DRAWN_LINE_RE = re.compile(r"(?:---|___)+")


@register_rule
class MisuseTypographicalCharacters(Rule):
    slug = "misuse_typographical_characters"
    title = "Misuse of typographical characters"
    description = (
        "Typographical characters like whitespace must not be used to format text. Similarly, hyphens or "
        "similar characters should not be used to create horizontal lines."
    )
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/F33",
            title="Failure due to using white space characters to create multiple columns in plain text content",
        ),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        for text_node in ctx.dom.find("text()", include_text=True):
            parent = text_node.get_parent()
            if parent is not None and parent.get_tag_name() in ("script", "style"):
                continue
            text = text_node.text()

            match = REPEATED_NBSP_RE.search(text)
            if match:
                outcome.error(
                    "Whitespace must not be used to format text.",
                    "misuse_of_whitespace",
                    text_node,
                    snippet=text.strip() or match.group(0),
                )
            match = DRAWN_LINE_RE.search(text)
            if match:
                outcome.error(
                    "Hyphens or underscores must not be used to draw lines.",
                    "misuse_of_hyphens_or_underscores",
                    text_node,
                    snippet=match.group(0),
                )

        outcome.finish("No misuse of typographical characters has been found.")
