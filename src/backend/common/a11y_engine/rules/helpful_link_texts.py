from __future__ import annotations

import re
from typing import Dict, Optional, Sequence, Tuple

from ..config import HelpfulLinkTextsRuleConfig
from ..context import RuleContext
from ..helpers import get_extension, normalize_text
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

# Words a link text should contain when the target is a file of the given type.
NON_HTML_TARGETS: Sequence[Tuple[Tuple[str, ...], Tuple[str, ...]]] = (
    (("jpg", "jpeg", "jpe", "gif", "png", "bmp", "tiff", "tif"), ("image", "picture", "graphic")),
    (
        ("wmv", "avi", "divx", "flv", "mov", "mpeg", "mpg", "mpe", "ogv", "webm", "mkv"),
        ("video", "motion picture", "film", "sequence"),
    ),
    (("txt", "csv", "css", "js", "rtx", "rtf"), ("text", "document")),
    (("mp3", "m4a", "wav", "ogg", "wma"), ("audio", "song", "track")),
    (("zip", "rar", "tar", "gz", "gzip", "7z"), ("archive",)),
    (("pdf",), ("document", "adobe", "acrobat")),
    (("doc", "docx", "dotx", "dotm"), ("document", "word", "office", "microsoft")),
    (
        ("xla", "xls", "xlt", "xlw", "xlsx", "xlsm", "xlsb", "xltx", "xltm", "xlam"),
        ("spreadsheet", "excel", "office", "microsoft"),
    ),
    (
        ("pot", "pps", "ppt", "pptx", "pptm", "ppsx", "ppsm", "potx", "potm", "ppam"),
        ("presentation", "slides", "powerpoint", "office", "microsoft"),
    ),
    (("odt",), ("document", "openoffice")),
    (("ods",), ("spreadsheet", "openoffice")),
    (("odp",), ("presentation", "slides", "openoffice")),
    (("pages",), ("document", "pages", "apple")),
    (("numbers",), ("spreadsheet", "numbers", "apple")),
    (("key",), ("presentation", "slides", "keynote", "apple")),
)


def link_text(link: Node) -> str:
    """Visible text of a link, with image alt texts standing in for images."""
    label = link.get_attribute("aria-label")
    if label and label.strip():
        return normalize_text(label)

    parts = []
    for child in link.get_children(include_text=True):
        text = child.text()
        if text.strip() or child.is_text_node():
            parts.append(text)
            continue
        parts.extend(image.get_attribute("alt") or "" for image in child.find("img"))
    return normalize_text(" ".join(parts))


def non_html_keywords(href: str) -> Optional[Tuple[str, ...]]:
    lowered = href.lower()
    if lowered.startswith("mailto:"):
        return ("email", "mail")
    if lowered.startswith("tel:"):
        return ("telephone", "phone", "call")
    extension = get_extension(href)
    if not extension:
        return None
    for extensions, keywords in NON_HTML_TARGETS:
        if extension in extensions:
            return (extension,) + keywords
    return None


@register_rule
class HelpfulLinkTexts(Rule):
    slug = "helpful_link_texts"
    title = "Helpful Link Texts"
    description = (
        "The purpose of all links should be obvious from the link text or direct context of the link. When "
        "leading to non-HTML content, links should inform about the file type of the target."
    )
    guideline_title = "2.4.4 Link Purpose"
    guideline_anchor = "navigation-mechanisms-refs"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H30",
            title="Providing link text that describes the purpose of a link for anchor elements",
        ),
    )
    config_model = HelpfulLinkTextsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        links = ctx.dom.find("a")
        if not links:
            outcome.skip("There are no links in the HTML code provided. Therefore this test was skipped.")
            return

        cfg = self.get_config(ctx)
        denylist = {text.strip().lower() for text in cfg.non_descriptive_link_texts}
        targets_by_text: Dict[str, str] = {}

        for link in links:
            text = link_text(link)
            if not text:
                outcome.error("The following link is missing a link text.", "missing_link_text", link)
                continue

            href = link.get_attribute("href")
            if not href:
                continue

            key = text.lower()
            known_href = targets_by_text.get(key)
            if known_href is not None and known_href != href:
                outcome.error(
                    "The link text of the following link is already used for another link with a different target.",
                    "duplicate_link_text",
                    link,
                )
                continue
            targets_by_text[key] = href

            words = re.sub(r"[^\w ]+", "", key).strip()
            if words in denylist:
                outcome.error(
                    "The link text of the following link does not properly describe its target.",
                    "non_descriptive_link_text",
                    link,
                )
                continue

            keywords = non_html_keywords(href)
            if keywords and not any(keyword in key for keyword in keywords):
                outcome.error(
                    "The link text of the following link does not properly describe the target file type "
                    "although it is non-HTML content.",
                    "missing_non_html_content_link_text",
                    link,
                )

        outcome.finish("All links in the HTML code have valid link texts provided.")
