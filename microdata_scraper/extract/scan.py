"""Whole-document passes: the id index and the top-level item roots.

Both walk the node arena once in document order. `scan_document` does
the two in a single loop, which is what the parser uses.
"""
from typing import Dict, List, Tuple
import logging

from .tree import DocumentTree, Node

logger = logging.getLogger(__name__)


def is_top_level_root(node: Node) -> bool:
    """An `itemscope` that is not itself some item's property value.

    `itemtype` is not required: untyped scopes are items too.
    """
    return node.has('itemscope') and not node.has('itemprop')


def _index_id(ids: Dict[str, int], node: Node) -> None:
    value = node.get('id')
    if value is None:
        return
    if value in ids:
        logger.debug('Duplicate id %r: node %d replaces node %d', value, node.index, ids[value])
    ids[value] = node.index


def build_id_index(tree: DocumentTree) -> Dict[str, int]:
    """Map every `id` attribute value to its node index; last one wins."""
    ids: Dict[str, int] = {}
    for node in tree:
        _index_id(ids, node)
    return ids


def collect_top_level(tree: DocumentTree) -> List[int]:
    return [node.index for node in tree if is_top_level_root(node)]


def scan_document(tree: DocumentTree) -> Tuple[Dict[str, int], List[int]]:
    ids: Dict[str, int] = {}
    roots: List[int] = []
    for node in tree:
        _index_id(ids, node)
        if is_top_level_root(node):
            roots.append(node.index)
    return ids, roots
