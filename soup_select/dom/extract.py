"""
Attribute, class and text readers for DOM nodes.

These never raise on a missing value: an absent attribute reads as an empty
string and a node without a text child has empty text content.
"""

from .node import Node

# Characters stripped from both ends of text content
TEXT_TRIM_CHARS = " \t\n\r"


def attr(node: Node, name: str) -> str:
    """
    Return the value of the first attribute called ``name``.

    Args:
        node: Any node; non-elements have no attributes
        name: The attribute name, matched exactly

    Returns:
        The attribute value, or an empty string if it isn't found
    """
    for attribute in node.attributes:
        if attribute.name == name:
            return attribute.value
    return ""


def has_class(node: Node, class_name: str) -> bool:
    """
    Check whether ``class_name`` is one of the node's classes.

    Only the first ``class`` attribute is consulted. Its value is split on
    single spaces and compared token by token, so "ab" does not contain "a".
    """
    for attribute in node.attributes:
        if attribute.name == "class":
            return class_name in attribute.value.split(" ")
    return False


def text_content(node: Node) -> str:
    """
    Return the node's own text, trimmed.

    A text node yields its data. Any other node yields the data of its first
    immediate text child. Deeper text is not collected.
    """
    if node.is_text:
        return node.data.strip(TEXT_TRIM_CHARS)
    for child in node.iter_children():
        if child.is_text:
            return child.data.strip(TEXT_TRIM_CHARS)
    return ""
