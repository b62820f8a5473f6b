"""
Document implementation for the DOM.
This module implements the root node that owns a parsed tree.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .comment import Comment
from .element import Element
from .node import Node, NodeType
from .text import Text

logger = logging.getLogger(__name__)


class Document(Node):
    """
    Document node implementation for the DOM.

    The document is the root of a parsed tree and the owner of every node in
    it. Query results stay valid for as long as the document is referenced.
    """

    def __init__(self):
        """Initialize a new, empty Document object."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"
        self.doctype: Optional[Node] = None
        self.document_element: Optional[Element] = None
        self.head: Optional[Element] = None
        self.body: Optional[Element] = None
        self.url: Optional[str] = None

        # Parse errors reported by the tree builder, if any
        self.parse_errors: List[str] = []

    @property
    def title(self) -> str:
        """Get the trimmed text of the first <title> in <head>."""
        if self.head is None:
            return ""
        title = self.head.first_with_tag("title")
        return title.text_content() if title is not None else ""

    def create_element(self, tag_name: str,
                       attributes: Optional[Iterable[Tuple[str, str]]] = None) -> Element:
        """
        Create a new element owned by this document.

        Args:
            tag_name: The element's tag name
            attributes: Optional (name, value) pairs in document order

        Returns:
            The new, detached element
        """
        return Element(tag_name, attributes, owner_document=self)

    def create_text_node(self, data: str) -> Text:
        return Text(data, self)

    def create_comment(self, data: str) -> Comment:
        return Comment(data, self)

    def create_doctype(self, name: str) -> Node:
        doctype = Node(NodeType.DOCUMENT_TYPE_NODE, self)
        doctype.node_name = name or "html"
        return doctype

    def update_references(self) -> None:
        """Point doctype, document_element, head and body at the parsed nodes."""
        self.doctype = None
        self.document_element = None
        for child in self.iter_children():
            if child.node_type == NodeType.DOCUMENT_TYPE_NODE and self.doctype is None:
                self.doctype = child
            elif child.is_element and self.document_element is None:
                self.document_element = child

        if self.document_element is not None:
            self.head = self.document_element.first_with_tag("head")
            self.body = self.document_element.first_with_tag("body")
        else:
            self.head = None
            self.body = None

        logger.debug(f"Updated references - head: {self.head is not None}, body: {self.body is not None}")

    def handle_error(self, error_message: str) -> None:
        """
        Record a non-fatal parse error.

        Args:
            error_message: The error message
        """
        logger.debug(f"Parse error: {error_message}")
        self.parse_errors.append(error_message)

    def debug_structure(self, max_depth: int = 10) -> str:
        """
        Generate an indented outline of the document tree.

        Args:
            max_depth: Deepest level to include

        Returns:
            A string representation of the document structure
        """
        lines: List[str] = []

        def walk(node: Node, level: int) -> None:
            if level > max_depth:
                return
            if node.is_text:
                if node.data.strip():
                    lines.append("  " * level + repr(node.data.strip()[:40]))
                return
            lines.append("  " * level + repr(node))
            for child in node.iter_children():
                walk(child, level + 1)

        walk(self, 0)
        return "\n".join(lines)
