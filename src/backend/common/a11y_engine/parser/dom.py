from __future__ import annotations

import re
from typing import Optional

import lxml.html
from lxml import etree

from .node import Node

_DOCTYPE_RE = re.compile(r"<!DOCTYPE\s+([\w:-]+)([^>]*)>", re.IGNORECASE)
_QUOTED_RE = re.compile(r"\"([^\"]*)\"|'([^']*)'")

# Checked in order against the doctype's system identifier.
DOCUMENT_STANDARDS = ("xhtml11", "xhtml1", "xhtml", "html4", "html3")


class Dom(Node):
    """Root of a parsed document.

    The root has no parent and no siblings, whatever the underlying tree says.
    """

    def __init__(self, root: etree._Element, source: str):
        super().__init__(root)
        self._source = source

    @classmethod
    def parse(cls, html: str) -> Optional["Dom"]:
        """Parse ``html``, returning ``None`` when there is nothing usable."""
        if not html or not html.strip():
            return None
        try:
            try:
                root = lxml.html.document_fromstring(html, parser=_make_parser())
            except ValueError:
                # Unicode input carrying an XML encoding declaration.
                root = lxml.html.document_fromstring(html.encode("utf-8"), parser=_make_parser())
        except (etree.ParserError, ValueError):
            return None
        if root is None:
            return None
        return cls(root, html)

    @property
    def source(self) -> str:
        return self._source

    def get_document_type(self) -> str:
        match = _DOCTYPE_RE.search(self._source)
        if not match or match.group(1).lower() != "html":
            return "unknown"

        ids = [a or b for a, b in _QUOTED_RE.findall(match.group(2))]
        keyword = match.group(2).strip().split(None, 1)[0].upper() if match.group(2).strip() else ""
        system_id = ""
        if keyword == "PUBLIC" and len(ids) >= 2:
            system_id = ids[1]
        elif keyword == "SYSTEM" and ids:
            system_id = ids[0]

        lowered = system_id.lower()
        for standard in DOCUMENT_STANDARDS:
            if standard in lowered:
                return standard
        return "html5"

    def outer_html(self) -> str:
        return self._source

    def inner_html(self) -> str:
        return lxml.html.tostring(self.element, encoding="unicode")

    def get_parent(self):
        return None

    def get_next(self, include_text: bool = False):
        return None

    def get_previous(self, include_text: bool = False):
        return None

    def has_parent(self) -> bool:
        return False


def _make_parser() -> lxml.html.HTMLParser:
    # Parsers are not shared between threads.
    return lxml.html.HTMLParser(default_doctype=False)
