"""Extraction passes over a parsed document.

`tree` turns a BeautifulSoup document into a node arena, `scan` finds
ids and top-level item roots, `values` reads property values and
`scope` assembles items.
"""
from .tree import DocumentTree, Node
from .scan import build_id_index, collect_top_level, scan_document
from .values import ValueExtractor
from .scope import ScopeBuilder

__all__ = [
    "DocumentTree",
    "Node",
    "build_id_index",
    "collect_top_level",
    "scan_document",
    "ValueExtractor",
    "ScopeBuilder",
]
