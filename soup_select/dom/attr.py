"""
Attr implementation for the DOM.
This module implements a single name/value attribute entry of an element.
"""

from typing import Optional


class Attr:
    """
    Attribute entry of an Element node.

    Namespaced names (``xlink:href``) are split into prefix and local name but
    lookups always use the full name.
    """

    def __init__(self, name: str, value: str, owner_element: Optional['Element'] = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
            owner_element: The element that owns this attribute
        """
        self.name = name
        self.value = value if value is not None else ""
        self.owner_element = owner_element

        self.prefix: Optional[str] = None
        self.local_name = name

        if ':' in name:
            self.prefix, self.local_name = name.split(':', 1)

    def __repr__(self):
        return f"Attr({self.name!r}, {self.value!r})"
