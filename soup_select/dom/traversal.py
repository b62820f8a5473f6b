"""
Tree traversal for id, class and tag lookups.

Each family comes in a shallow form, which looks at the immediate children
of the start node, and a recursive ``_r`` form, which covers the whole
subtree in document order. All functions return references into the tree
they were given.
"""

from typing import List, Optional

from .extract import attr, has_class
from .node import Node


def _is_tag(node: Node, tag_name: str) -> bool:
    return node.is_element and node.tag_name == tag_name


# By id

def first_with_id(node: Node, element_id: str) -> Optional[Node]:
    """Return the first child element with the given id."""
    return find_first_with_id(node, element_id, False)


def first_with_id_r(node: Node, element_id: str) -> Optional[Node]:
    """Recursive variant of first_with_id."""
    return find_first_with_id(node, element_id, True)


def find_first_with_id(node: Node, element_id: str, recursive: bool) -> Optional[Node]:
    for child in node.iter_children():
        if child.is_element and attr(child, "id") == element_id:
            return child
    if not recursive:
        return None
    # Children are all checked before any grandchild
    for child in node.iter_children():
        if child.is_element:
            found = find_first_with_id(child, element_id, True)
            if found is not None:
                return found
    return None


# By class name

def first_with_class_name(node: Node, class_name: str) -> Optional[Node]:
    """Return the first child that has the given class."""
    return find_first_with_class_name(node, class_name, False)


def first_with_class_name_r(node: Node, class_name: str) -> Optional[Node]:
    """Recursive variant of first_with_class_name."""
    return find_first_with_class_name(node, class_name, True)


def find_first_with_class_name(node: Node, class_name: str, recursive: bool) -> Optional[Node]:
    for child in node.iter_children():
        if has_class(child, class_name):
            return child
    if not recursive:
        return None
    for child in node.iter_children():
        found = find_first_with_class_name(child, class_name, True)
        if found is not None:
            return found
    return None


def all_with_class_name(node: Node, class_name: str) -> List[Node]:
    """
    Return ``[node]`` if the node itself has the class, else ``[]``.

    Unlike all_with_tag this tests the start node, not its children.
    """
    return find_all_with_class_name(node, class_name, False)


def all_with_class_name_r(node: Node, class_name: str) -> List[Node]:
    """Return the node (if it matches) followed by every matching descendant."""
    return find_all_with_class_name(node, class_name, True)


def find_all_with_class_name(node: Node, class_name: str, recursive: bool) -> List[Node]:
    result: List[Node] = []
    if has_class(node, class_name):
        result.append(node)
    if not recursive:
        return result
    for child in node.iter_children():
        result.extend(find_all_with_class_name(child, class_name, True))
    return result


# By tag name

def first_with_tag(node: Node, tag_name: str) -> Optional[Node]:
    """Return the first child element with the given tag."""
    return find_first_with_tag(node, tag_name, False)


def first_with_tag_r(node: Node, tag_name: str) -> Optional[Node]:
    """Recursive variant of first_with_tag."""
    return find_first_with_tag(node, tag_name, True)


def find_first_with_tag(node: Node, tag_name: str, recursive: bool) -> Optional[Node]:
    for child in node.iter_children():
        if _is_tag(child, tag_name):
            return child
    if not recursive:
        return None
    for child in node.iter_children():
        if child.is_element:
            found = find_first_with_tag(child, tag_name, True)
            if found is not None:
                return found
    return None


def all_with_tag(node: Node, tag_name: str) -> List[Node]:
    """Return every child element with the given tag. The node itself is never included."""
    return find_all_with_tag(node, tag_name, False)


def all_with_tag_r(node: Node, tag_name: str) -> List[Node]:
    """Return every descendant element with the given tag, in document order."""
    return find_all_with_tag(node, tag_name, True)


def find_all_with_tag(node: Node, tag_name: str, recursive: bool) -> List[Node]:
    result: List[Node] = []
    for child in node.iter_children():
        if _is_tag(child, tag_name):
            result.append(child)
        if recursive:
            result.extend(find_all_with_tag(child, tag_name, True))
    return result
