"""HTML document adapters (pure functions over markup, no I/O)."""

from .title import extract_title

__all__ = ["extract_title"]
