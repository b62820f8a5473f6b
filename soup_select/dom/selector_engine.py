"""
Selector dispatch for DOM queries.
This module routes a Selector to the id, class or tag traversal.
"""

import logging
from typing import List, Optional

from .node import Node
from .traversal import (
    find_all_with_class_name,
    find_all_with_tag,
    find_first_with_class_name,
    find_first_with_id,
    find_first_with_tag,
)

logger = logging.getLogger(__name__)


class Selector:
    """
    A single-criterion node selector.

    Only one criterion is ever applied. ``id`` takes precedence over
    ``class_name``, which takes precedence over ``tag``; an empty string
    means the criterion is unset.
    """

    def __init__(self, id: str = "", class_name: str = "", tag: str = "",
                 recursive: bool = False):
        """
        Initialize a selector.

        Args:
            id: Select an element with this id
            class_name: Select nodes that have this class
            tag: Select elements with this tag name
            recursive: Search the whole subtree instead of the direct children
        """
        self.id = id or ""
        self.class_name = class_name or ""
        self.tag = tag or ""
        self.recursive = recursive

    @property
    def mode(self) -> Optional[str]:
        """Name of the criterion that will run, or None if nothing is set."""
        if self.id:
            return "id"
        if self.class_name:
            return "class"
        if self.tag:
            return "tag"
        return None

    def __eq__(self, other):
        if not isinstance(other, Selector):
            return NotImplemented
        return (self.id, self.class_name, self.tag, self.recursive) == \
            (other.id, other.class_name, other.tag, other.recursive)

    def __repr__(self):
        return (f"Selector(id={self.id!r}, class_name={self.class_name!r}, "
                f"tag={self.tag!r}, recursive={self.recursive})")


def select_all(node: Node, selector: Selector) -> List[Node]:
    """
    Select every node matching the selector.

    Args:
        node: The node to search from
        selector: The selector to apply

    Returns:
        Matching nodes in document order, or an empty list
    """
    mode = selector.mode
    if mode == "id":
        # Ids are unique, so at most one match
        found = find_first_with_id(node, selector.id, selector.recursive)
        return [found] if found is not None else []
    if mode == "class":
        return find_all_with_class_name(node, selector.class_name, selector.recursive)
    if mode == "tag":
        return find_all_with_tag(node, selector.tag, selector.recursive)

    logger.debug(f"Empty selector matches nothing: {selector!r}")
    return []


def select_first(node: Node, selector: Selector) -> Optional[Node]:
    """
    Select the first node matching the selector.

    Args:
        node: The node to search from
        selector: The selector to apply

    Returns:
        The first match, or None
    """
    mode = selector.mode
    if mode == "id":
        return find_first_with_id(node, selector.id, selector.recursive)
    if mode == "class":
        return find_first_with_class_name(node, selector.class_name, selector.recursive)
    if mode == "tag":
        return find_first_with_tag(node, selector.tag, selector.recursive)

    logger.debug(f"Empty selector matches nothing: {selector!r}")
    return None
