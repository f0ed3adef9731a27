from __future__ import annotations

import re
from html import escape
from typing import Iterable, List, Optional
from urllib.parse import urljoin, urlparse

from .parser import Node

_SANITIZE_RE = re.compile(r"[/.\[\]=\s:?&#%]")

VIDEO_EXTENSIONS = (
    "3g2", "3gp", "3gpp", "asf", "avi", "divx", "dv", "flv", "m4v", "mkv", "mov", "mp4",
    "mpeg", "mpg", "mpv", "ogm", "ogv", "qt", "rm", "vob", "wmv",
)

AUDIO_EXTENSIONS = (
    "aac", "ac3", "aif", "aiff", "m3a", "m4a", "m4b", "mka", "mp1", "mp2", "mp3", "ogg",
    "oga", "ram", "wav", "wma",
)


def sanitize_src(src: Optional[str]) -> str:
    """Collapse a URL or path into a token usable inside an option key.

    >>> sanitize_src("images/Logo.png")
    'images--logo--png'
    """
    if not src:
        return ""
    value = src.replace("://", "--")
    value = _SANITIZE_RE.sub("--", value)
    return value.lower()


def linkify_src(src: Optional[str], base_url: Optional[str] = None) -> str:
    if not src:
        return ""
    parsed = urlparse(src)
    if parsed.scheme in ("http", "https"):
        return f'<a href="{escape(src)}" target="_blank">{escape(src)}</a>'
    if base_url:
        absolute = urljoin(base_url, src)
        return f'<a href="{escape(absolute)}" target="_blank">{escape(src)}</a>'
    return src


def get_extension(src: Optional[str]) -> str:
    if not src:
        return ""
    path = urlparse(src).path or src
    filename = path.rsplit("/", 1)[-1]
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def src_has_extension(src: Optional[str], extensions: Iterable[str]) -> bool:
    ext = get_extension(src)
    return bool(ext) and ext in {e.lower() for e in extensions}


def is_video_file(src: Optional[str]) -> bool:
    return src_has_extension(src, VIDEO_EXTENSIONS)


def is_audio_file(src: Optional[str]) -> bool:
    return src_has_extension(src, AUDIO_EXTENSIONS)


def is_captcha(node: Node) -> bool:
    for attr in ("class", "id", "src"):
        value = node.get_attribute(attr)
        if value and "captcha" in value.lower():
            return True
    return False


def node_identifier(node: Node) -> str:
    """Stable key for a node within one document: its id, else name, else line."""
    node_id = node.get_attribute("id")
    if node_id:
        return "id_" + sanitize_src(node_id)
    name = node.get_attribute("name")
    if name:
        return "name_" + sanitize_src(name)
    return f"line_{node.get_line_no()}"


def split_tokens(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [token for token in re.split(r"[\s,]+", value.strip()) if token]


def normalize_text(value: Optional[str]) -> str:
    """Collapse whitespace (non-breaking spaces included) and trim."""
    if not value:
        return ""
    return re.sub(r"\s+", " ", value.replace("\xa0", " ")).strip()


def find_ancestor(node: Node, tag_names: Iterable[str]) -> Optional[Node]:
    """Nearest ancestor of ``node`` whose tag is one of ``tag_names``."""
    wanted = set(tag_names)
    parent = node.get_parent()
    while parent is not None:
        if parent.get_tag_name() in wanted:
            return parent
        parent = parent.get_parent()
    return None


def slugify_message(message: str, prefix: str = "") -> str:
    """Turn a free-text message into a message code.

    >>> slugify_message("Stray end tag “div”.", "error")
    'error_stray_end_tag_div'
    """
    slug = re.sub(r"[^a-z0-9]+", "_", message.lower()).strip("_")
    return f"{prefix}_{slug}" if prefix else slug
