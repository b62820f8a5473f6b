"""
soup_select - id, class and tag lookups over parsed HTML trees.
"""

import logging

from soup_select.dom import (
    Attr,
    Comment,
    Document,
    Element,
    Node,
    NodeType,
    Selector,
    Text,
    all_with_class_name,
    all_with_class_name_r,
    all_with_tag,
    all_with_tag_r,
    attr,
    first_with_class_name,
    first_with_class_name_r,
    first_with_id,
    first_with_id_r,
    first_with_tag,
    first_with_tag_r,
    has_class,
    select_all,
    select_first,
    text_content,
)
from soup_select.parser import HTMLParser, from_soup, parse
from soup_select.utils import Config, setup_logging

logger = logging.getLogger(__name__)

# Package information
__version__ = "1.0.0"
__author__ = "soup_select developers"
__description__ = "Id, class and tag lookups over parsed HTML trees"

__all__ = [
    'Attr', 'Comment', 'Document', 'Element', 'Node', 'NodeType', 'Text',
    'Selector', 'select_all', 'select_first',
    'attr', 'has_class', 'text_content',
    'first_with_id', 'first_with_id_r',
    'first_with_class_name', 'first_with_class_name_r',
    'all_with_class_name', 'all_with_class_name_r',
    'first_with_tag', 'first_with_tag_r',
    'all_with_tag', 'all_with_tag_r',
    'HTMLParser', 'parse', 'from_soup',
    'Config', 'setup_logging',
]

logger.debug(f"soup_select v{__version__} initialized")
