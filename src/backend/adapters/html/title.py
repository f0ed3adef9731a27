from __future__ import annotations

from bs4 import BeautifulSoup


def extract_title(html: str) -> str:
    """
    Return the trimmed text of the document's <title>.

    An empty string means no title could be found, which callers treat as
    "the HTML could not be parsed".
    """
    if not html or not html.strip():
        return ""
    soup = BeautifulSoup(html, "lxml")
    if soup.title is None:
        return ""
    return " ".join(soup.title.get_text().split())
