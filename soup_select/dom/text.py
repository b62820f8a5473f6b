"""
Text node implementation for the DOM.
This module implements the character data leaf of the tree.
"""

from typing import Optional

from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation for the DOM.

    This class represents a text node in the DOM tree. Text nodes never have
    children.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data
        self.data = data  # Alias for node_value

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def is_whitespace(self) -> bool:
        """True when the text holds nothing but whitespace."""
        return not self.data.strip()

    def append_child(self, child: Node) -> Node:
        raise ValueError("Text nodes cannot have children")

    def __repr__(self) -> str:
        return f"<Text {self.data!r}>"
