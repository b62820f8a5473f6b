"""
Comment node implementation for the DOM.
"""

from typing import Optional

from .node import Node, NodeType


class Comment(Node):
    """
    Comment node implementation for the DOM.

    Comments are never matched by a selector and never count as text.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.COMMENT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.node_value = data
        self.data = data

    def append_child(self, child: Node) -> Node:
        raise ValueError("Comment nodes cannot have children")

    def __repr__(self) -> str:
        return f"<Comment {self.data!r}>"
