"""
Parsers that build soup_select documents.
"""

from .html_parser import HTMLParser, parse, from_soup

__all__ = ['HTMLParser', 'parse', 'from_soup']
