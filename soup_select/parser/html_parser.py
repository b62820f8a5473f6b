"""
HTML parser implementation.
This module turns markup into a soup_select Document. Tokenizing and tree
construction are delegated to html5lib; BeautifulSoup trees can be converted
as well.
"""

import logging
from typing import Any, Iterable, List, Optional, Set

import html5lib
from bs4 import BeautifulSoup, Comment as SoupComment, Doctype as SoupDoctype, Tag

from ..dom import Document, Node
from ..utils.config import Config
from ..utils.logging import PerformanceLogger, log_exception

logger = logging.getLogger(__name__)

# xml.dom node type numbers, as produced by html5lib's "dom" tree builder
_DOM_ELEMENT_NODE = 1
_DOM_TEXT_NODE = 3
_DOM_CDATA_SECTION_NODE = 4
_DOM_COMMENT_NODE = 8
_DOM_DOCUMENT_TYPE_NODE = 10


class HTMLParser:
    """HTML parser using html5lib for full HTML5 tree construction."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Parser options; defaults are used when omitted
        """
        self.config = config or Config()
        self.keep_whitespace_text = bool(self.config.get("parser.keep_whitespace_text", True))
        self.keep_comments = bool(self.config.get("parser.keep_comments", True))
        self._perf = PerformanceLogger(logger, "HTMLParser")
        logger.debug("HTML parser initialized "
                     f"(keep_whitespace_text={self.keep_whitespace_text}, "
                     f"keep_comments={self.keep_comments})")

    def parse(self, source: Any, base_url: Optional[str] = None,
              encoding: Optional[str] = None) -> Document:
        """
        Parse HTML content into a Document.

        Args:
            source: A str, bytes, or file-like object holding the markup
            base_url: Optional URL recorded on the document
            encoding: Encoding to force for byte input; ignored for text
                input, whether a str or a text stream

        Returns:
            The parsed Document

        Raises:
            TypeError: If source is None
            Exception: Whatever html5lib or the source stream raises
        """
        if source is None:
            raise TypeError("Cannot parse None HTML content")

        self._perf.start("parse")
        try:
            kwargs = {}
            if encoding and self._is_binary(source):
                kwargs["override_encoding"] = encoding
            parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
            parsed = parser.parse(source, **kwargs)
        except Exception as e:
            self._perf.clear()
            log_exception(logger, e, "Error in HTML parser")
            raise

        document = Document()
        document.url = base_url
        for position, code, datavars in parser.errors:
            document.handle_error(f"{code} at {position}")

        self._convert_dom_children(parsed.childNodes, document, document)
        document.update_references()

        self._perf.end("parse")
        return document

    @staticmethod
    def _is_binary(source: Any) -> bool:
        if isinstance(source, (bytes, bytearray)):
            return True
        if hasattr(source, "read"):
            # html5lib checks the stream type the same way
            return not isinstance(source.read(0), str)
        return False

    def _convert_dom_children(self, nodes: Iterable, parent: Node, document: Document) -> None:
        """
        Recursively convert html5lib (minidom) nodes into our DOM structure.

        The dom tree builder can leave runs of adjacent text nodes; each run
        becomes a single Text node.

        Args:
            nodes: The parsed child nodes from html5lib
            parent: The parent node in our DOM structure
            document: The document that will own the new nodes
        """
        pending: List[str] = []
        for node in nodes:
            node_type = node.nodeType

            if node_type in (_DOM_TEXT_NODE, _DOM_CDATA_SECTION_NODE):
                pending.append(node.data)
                continue

            self._flush_text(pending, parent, document)
            if node_type == _DOM_COMMENT_NODE:
                if self.keep_comments:
                    parent.append_child(document.create_comment(node.data))
            elif node_type == _DOM_DOCUMENT_TYPE_NODE:
                parent.append_child(document.create_doctype(node.name))
            elif node_type == _DOM_ELEMENT_NODE:
                element = document.create_element(node.tagName, node.attributes.items())
                parent.append_child(element)
                self._convert_dom_children(node.childNodes, element, document)
            else:
                logger.debug(f"Skipping unsupported node type {node_type}")
        self._flush_text(pending, parent, document)

    def from_soup(self, soup: Tag, base_url: Optional[str] = None) -> Document:
        """
        Convert a BeautifulSoup tree into a Document.

        bs4 splits multi-valued attributes such as ``class`` on any
        whitespace by default, which loses the original separators. Build
        the soup with ``multi_valued_attributes=None`` to keep attribute
        values exactly as written. Split values are joined with single
        spaces and a warning is logged.

        Args:
            soup: A BeautifulSoup object, or any Tag to use as the only root child
            base_url: Optional URL recorded on the document

        Returns:
            A Document with the same structure
        """
        document = Document()
        document.url = base_url

        split_names: Set[str] = set()
        if isinstance(soup, BeautifulSoup):
            self._convert_soup_children(soup.contents, document, document, split_names)
        else:
            self._convert_soup_children([soup], document, document, split_names)
        document.update_references()

        if split_names:
            logger.warning("BeautifulSoup split multi-valued attributes "
                           f"({', '.join(sorted(split_names))}); values were joined with single spaces. "
                           "Use multi_valued_attributes=None to keep them exact")
        return document

    def _convert_soup_children(self, nodes: Iterable, parent: Node, document: Document,
                               split_names: Set[str]) -> None:
        pending: List[str] = []
        for node in nodes:
            if isinstance(node, Tag):
                self._flush_text(pending, parent, document)
                element = document.create_element(node.name, self._soup_attributes(node, split_names))
                parent.append_child(element)
                self._convert_soup_children(node.contents, element, document, split_names)
            elif isinstance(node, SoupDoctype):
                self._flush_text(pending, parent, document)
                # bs4 keeps the whole declaration body; the name is its first word
                words = str(node).split()
                parent.append_child(document.create_doctype(words[0] if words else "html"))
            elif isinstance(node, SoupComment):
                self._flush_text(pending, parent, document)
                if self.keep_comments:
                    parent.append_child(document.create_comment(str(node)))
            else:
                pending.append(str(node))
        self._flush_text(pending, parent, document)

    @staticmethod
    def _soup_attributes(tag: Tag, split_names: Set[str]):
        for name, value in tag.attrs.items():
            if isinstance(value, (list, tuple)):
                split_names.add(name)
                value = " ".join(value)
            yield name, value

    def _flush_text(self, pending: List[str], parent: Node, document: Document) -> None:
        if not pending:
            return
        data = "".join(pending)
        pending.clear()
        if not data:
            return
        if not self.keep_whitespace_text and not data.strip():
            return
        parent.append_child(document.create_text_node(data))


def parse(source: Any, config: Optional[Config] = None,
          base_url: Optional[str] = None, encoding: Optional[str] = None) -> Document:
    """
    Parse markup into a Document.

    Args:
        source: A str, bytes, or file-like object holding the markup
        config: Parser options; defaults are used when omitted
        base_url: Optional URL recorded on the document
        encoding: Encoding to force for byte input

    Returns:
        The parsed Document
    """
    return HTMLParser(config).parse(source, base_url=base_url, encoding=encoding)


def from_soup(soup: Tag, config: Optional[Config] = None) -> Document:
    """Convert a BeautifulSoup tree into a Document."""
    return HTMLParser(config).from_soup(soup)
