from .dom import Dom
from .node import Node, TextNode
from .selector import css_to_xpath

__all__ = ["Dom", "Node", "TextNode", "css_to_xpath"]
