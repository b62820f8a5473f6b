"""
Node implementation for the DOM.
This module implements the base tree node that the selector engine walks.
"""

from enum import IntEnum
from typing import Iterator, List, Optional


class NodeType(IntEnum):
    """Node types, numbered as in the HTML5 DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10


class Node:
    """
    Base Node implementation for the DOM.

    Children are kept both as an ordered list and as first_child/next_sibling
    links. The tree owns its nodes; query results are plain references back
    into it.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.first_child: Optional['Node'] = None
        self.last_child: Optional['Node'] = None
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        # Node properties
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    @property
    def attributes(self) -> List['Attr']:
        """Only elements carry attributes."""
        return []

    def iter_children(self) -> Iterator['Node']:
        """Yield the immediate children by following the sibling links."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Used by tree builders only; the selector engine never mutates a tree.

        Args:
            child: The node to append

        Returns:
            The appended node

        Raises:
            ValueError: If the child already belongs to a tree or is this node
        """
        if child is self:
            raise ValueError("A node cannot be its own child")
        if child.parent_node is not None:
            raise ValueError("Child already has a parent")

        child.parent_node = self

        if self.last_child is not None:
            self.last_child.next_sibling = child
            child.previous_sibling = self.last_child
        else:
            self.first_child = child
        self.last_child = child

        self.child_nodes.append(child)
        return child

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return self.first_child is not None

    # Query wrappers. Each forwards to the free function of the same name.

    def select_all(self, selector: 'Selector') -> List['Node']:
        """Return every node under this one matching the selector."""
        from .selector_engine import select_all
        return select_all(self, selector)

    def select_first(self, selector: 'Selector') -> Optional['Node']:
        """Return the first node under this one matching the selector."""
        from .selector_engine import select_first
        return select_first(self, selector)

    def first_with_id(self, element_id: str) -> Optional['Node']:
        from .traversal import first_with_id
        return first_with_id(self, element_id)

    def first_with_id_r(self, element_id: str) -> Optional['Node']:
        from .traversal import first_with_id_r
        return first_with_id_r(self, element_id)

    def first_with_class_name(self, class_name: str) -> Optional['Node']:
        from .traversal import first_with_class_name
        return first_with_class_name(self, class_name)

    def first_with_class_name_r(self, class_name: str) -> Optional['Node']:
        from .traversal import first_with_class_name_r
        return first_with_class_name_r(self, class_name)

    def all_with_class_name(self, class_name: str) -> List['Node']:
        from .traversal import all_with_class_name
        return all_with_class_name(self, class_name)

    def all_with_class_name_r(self, class_name: str) -> List['Node']:
        from .traversal import all_with_class_name_r
        return all_with_class_name_r(self, class_name)

    def first_with_tag(self, tag_name: str) -> Optional['Node']:
        from .traversal import first_with_tag
        return first_with_tag(self, tag_name)

    def first_with_tag_r(self, tag_name: str) -> Optional['Node']:
        from .traversal import first_with_tag_r
        return first_with_tag_r(self, tag_name)

    def all_with_tag(self, tag_name: str) -> List['Node']:
        from .traversal import all_with_tag
        return all_with_tag(self, tag_name)

    def all_with_tag_r(self, tag_name: str) -> List['Node']:
        from .traversal import all_with_tag_r
        return all_with_tag_r(self, tag_name)

    def attr(self, name: str) -> str:
        """Return the attribute value, or an empty string if it isn't set."""
        from .extract import attr
        return attr(self, name)

    def has_class(self, class_name: str) -> bool:
        from .extract import has_class
        return has_class(self, class_name)

    def text_content(self) -> str:
        """Return the trimmed text of this node or of its first text child."""
        from .extract import text_content
        return text_content(self)

    def __str__(self) -> str:
        return self.node_value if self.node_value is not None else self.node_name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name}>"
