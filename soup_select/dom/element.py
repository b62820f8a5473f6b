"""
Element implementation for the DOM.
This module implements element nodes with an ordered attribute list.
"""

from typing import Iterable, List, Optional, Tuple

from .attr import Attr
from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation for the DOM.

    Tag names are stored exactly as the parser produced them, and matching
    against them is case-sensitive.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Iterable[Tuple[str, str]]] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Optional (name, value) pairs, kept in the given order
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name
        self.node_name = tag_name

        # Duplicate names are allowed; lookups take the first one
        self._attributes: List[Attr] = []
        for name, value in attributes or ():
            self.append_attribute(name, value)

    @property
    def attributes(self) -> List[Attr]:
        return self._attributes

    @property
    def id(self) -> str:
        """Get the ID of the element."""
        return self.get_attribute('id') or ""

    @property
    def class_name(self) -> str:
        """Get the class attribute of the element."""
        return self.get_attribute('class') or ""

    def has_attribute(self, name: str) -> bool:
        """
        Check if the element has an attribute.

        Args:
            name: The attribute name

        Returns:
            True if the attribute exists, False otherwise
        """
        return self.get_attribute_node(name) is not None

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of the first attribute with the given name.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        attr = self.get_attribute_node(name)
        return attr.value if attr is not None else None

    def get_attribute_node(self, name: str) -> Optional[Attr]:
        for attr in self._attributes:
            if attr.name == name:
                return attr
        return None

    def append_attribute(self, name: str, value: str) -> Attr:
        """
        Append an attribute while the tree is being built.

        Args:
            name: The attribute name
            value: The attribute value

        Returns:
            The new Attr
        """
        attr = Attr(name, value, owner_element=self)
        self._attributes.append(attr)
        return attr

    def __str__(self) -> str:
        return self.tag_name

    def __repr__(self) -> str:
        rendered = "".join(f' {attr.name}="{attr.value}"' for attr in self._attributes)
        return f"<Element {self.tag_name}{rendered}>"
