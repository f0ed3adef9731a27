from __future__ import annotations

import re

from ..context import RuleContext
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

_LANG_RE = re.compile(r"^(?:[a-z]{2}|[a-z]{2}-[A-Z]{2})$")
SCRIPT_SUBTAGS = ("zh-Hans", "zh-Hant")


def is_lang_valid(lang: str) -> bool:
    return bool(_LANG_RE.match(lang)) or lang in SCRIPT_SUBTAGS


@register_rule
class DocumentLanguage(Rule):
    slug = "document_language"
    title = "Document Language"
    description = "The main language of the document must be provided as attribute in the html tag."
    guideline_title = "3.1.1 Language of Page"
    guideline_anchor = "meaning-doc-lang-id"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H57", title="Using language attributes on the html element"),
    )

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        html = ctx.dom.find("html", single=True)
        attribute = "xml:lang" if "xhtml" in ctx.dom.get_document_type() else "lang"
        code_name = attribute.replace(":", "_")
        lang = html.get_attribute(attribute) if html is not None else None

        if not lang:
            outcome.error(
                f"The html element is missing the {attribute} attribute.",
                f"missing_{code_name}_attribute",
            )
        elif not is_lang_valid(lang.strip()):
            outcome.error(
                f"The html element has an invalid {attribute} attribute.",
                f"invalid_{code_name}_attribute",
            )

        outcome.finish(
            f"The document language is properly provided through the {attribute} attribute of the html element."
        )
