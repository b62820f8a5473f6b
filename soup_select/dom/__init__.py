"""
DOM model and selector engine.
This package provides the node tree and the id/class/tag queries over it.
"""

from .node import Node, NodeType
from .element import Element
from .attr import Attr
from .text import Text
from .comment import Comment
from .document import Document
from .extract import attr, has_class, text_content
from .selector_engine import Selector, select_all, select_first
from .traversal import (
    all_with_class_name,
    all_with_class_name_r,
    all_with_tag,
    all_with_tag_r,
    first_with_class_name,
    first_with_class_name_r,
    first_with_id,
    first_with_id_r,
    first_with_tag,
    first_with_tag_r,
)

__all__ = [
    'Node', 'NodeType', 'Element', 'Attr', 'Text', 'Comment', 'Document',
    'Selector', 'select_all', 'select_first',
    'attr', 'has_class', 'text_content',
    'first_with_id', 'first_with_id_r',
    'first_with_class_name', 'first_with_class_name_r',
    'all_with_class_name', 'all_with_class_name_r',
    'first_with_tag', 'first_with_tag_r',
    'all_with_tag', 'all_with_tag_r',
]
