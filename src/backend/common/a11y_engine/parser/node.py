from __future__ import annotations

from html import escape
from typing import Dict, List, Optional, Union

import lxml.html
from lxml import etree

from .selector import css_to_xpath

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def _is_element(obj) -> bool:
    # Comments and processing instructions carry a non-string tag.
    return isinstance(getattr(obj, "tag", None), str)


class TextNode:
    """A run of character data, addressed through the element that owns it.

    lxml keeps text on elements (``el.text`` before the first child and
    ``child.tail`` after each child), so a text node is identified by its owner
    element plus whether it is that element's tail.
    """

    def __init__(self, owner: etree._Element, is_tail: bool):
        self._owner = owner
        self._is_tail = is_tail

    def is_text_node(self) -> bool:
        return True

    def text(self) -> str:
        value = self._owner.tail if self._is_tail else self._owner.text
        return value or ""

    def outer_html(self) -> str:
        return escape(self.text(), quote=False)

    def inner_html(self) -> str:
        return self.outer_html()

    def get_tag_name(self) -> str:
        return "#text"

    def get_line_no(self) -> int:
        return self._owner.sourceline or 0

    def get_parent(self) -> Optional[Node]:
        parent = self._owner.getparent() if self._is_tail else self._owner
        if parent is None:
            return None
        return Node(parent)

    def has_parent(self) -> bool:
        return self.get_parent() is not None

    def get_next(self, include_text: bool = False) -> Optional[Union[Node, TextNode]]:
        return _sibling(self, 1, include_text)

    def get_previous(self, include_text: bool = False) -> Optional[Union[Node, TextNode]]:
        return _sibling(self, -1, include_text)

    def get_children(self, include_text: bool = False) -> list:
        return []

    def has_children(self, include_text: bool = False) -> bool:
        return False

    def find(self, selector: str, include_text: bool = False, single: bool = False):
        return None if single else []

    def get_attribute(self, name: str) -> Optional[str]:
        return None

    def has_attribute(self, name: str) -> bool:
        return False

    def get_attributes(self) -> Dict[str, str]:
        return {}

    def is_same_node(self, other) -> bool:
        return (
            isinstance(other, TextNode)
            and other._owner is self._owner
            and other._is_tail == self._is_tail
        )

    def __repr__(self) -> str:
        return f"TextNode({self.text()!r})"


class Node:
    """Queryable, navigable view of one element of a parsed HTML document."""

    def __init__(self, element: etree._Element):
        self._element = element

    @property
    def element(self) -> etree._Element:
        return self._element

    def find(self, selector: str, include_text: bool = False, single: bool = False):
        """Run a CSS selector against this node's subtree (this node included).

        Returns a list of nodes, or with ``single`` the first match or ``None``.
        """
        raw = self._element.xpath(css_to_xpath(selector))
        nodes = _wrap_results(raw, include_text)
        if single:
            return nodes[0] if nodes else None
        return nodes

    def outer_html(self) -> str:
        return lxml.html.tostring(self._element, encoding="unicode", with_tail=False)

    def inner_html(self) -> str:
        parts = [escape(self._element.text, quote=False)] if self._element.text else []
        for child in self._element:
            parts.append(lxml.html.tostring(child, encoding="unicode", with_tail=True))
        return "".join(parts)

    def text(self) -> str:
        return str(self._element.text_content())

    def get_tag_name(self) -> str:
        return self._element.tag.lower()

    def get_attributes(self) -> Dict[str, str]:
        return dict(self._element.attrib)

    def get_attribute(self, name: str) -> Optional[str]:
        value = self._element.get(name)
        if value is None and name == "xml:lang":
            value = self._element.get(XML_LANG)
        return value

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    def get_parent(self) -> Optional[Node]:
        parent = self._element.getparent()
        if parent is None:
            return None
        return Node(parent)

    def has_parent(self) -> bool:
        return self._element.getparent() is not None

    def get_next(self, include_text: bool = False) -> Optional[Union[Node, TextNode]]:
        return _sibling(self, 1, include_text)

    def get_previous(self, include_text: bool = False) -> Optional[Union[Node, TextNode]]:
        return _sibling(self, -1, include_text)

    def get_children(self, include_text: bool = False) -> List[Union[Node, TextNode]]:
        return _child_nodes(self._element, include_text)

    def has_children(self, include_text: bool = False) -> bool:
        return bool(self.get_children(include_text))

    def is_text_node(self) -> bool:
        return False

    def get_line_no(self) -> int:
        return self._element.sourceline or 0

    def get_node_path(self) -> str:
        return self._element.getroottree().getpath(self._element)

    def is_same_node(self, other) -> bool:
        return isinstance(other, Node) and other._element is self._element

    def contains(self, other: Union[Node, TextNode]) -> bool:
        """True if ``other`` lies inside this node's subtree (or is this node)."""
        current = other if isinstance(other, Node) else other.get_parent()
        while current is not None:
            if current._element is self._element:
                return True
            current = current.get_parent()
        return False

    def precedes(self, other: Node) -> bool:
        """True if this node starts before ``other`` in document order."""
        for element in self._element.getroottree().iter():
            if element is self._element:
                return True
            if element is other.element:
                return False
        return False

    def __repr__(self) -> str:
        return f"Node(<{self.get_tag_name()}> line {self.get_line_no()})"


def _wrap_results(raw, include_text: bool) -> List[Union[Node, TextNode]]:
    # Boolean, number and string XPath results are not node sets.
    if not isinstance(raw, list):
        return []
    nodes: List[Union[Node, TextNode]] = []
    for item in raw:
        if _is_element(item):
            nodes.append(Node(item))
        elif include_text and isinstance(item, str) and getattr(item, "getparent", None):
            owner = item.getparent()
            if owner is not None:
                nodes.append(TextNode(owner, bool(item.is_tail)))
    return nodes


def _child_nodes(element: etree._Element, include_text: bool) -> List[Union[Node, TextNode]]:
    nodes: List[Union[Node, TextNode]] = []
    if include_text and element.text:
        nodes.append(TextNode(element, False))
    for child in element:
        if _is_element(child):
            nodes.append(Node(child))
        if include_text and child.tail:
            nodes.append(TextNode(child, True))
    return nodes


def _sibling(node, step: int, include_text: bool):
    parent = node.get_parent()
    if parent is None:
        return None
    siblings = _child_nodes(parent.element, include_text=True)
    for idx, candidate in enumerate(siblings):
        if candidate.is_same_node(node):
            break
    else:
        return None

    idx += step
    while 0 <= idx < len(siblings):
        candidate = siblings[idx]
        if include_text or not candidate.is_text_node():
            return candidate
        idx += step
    return None
