"""Builds an `Item` from its scope root.

For a root node the builder records types and id, then walks the nodes
named by `itemref` followed by the root's own children. At every node:

- `itemscope` + `itemprop`: a nested item, added under each property name;
  its subtree belongs to the nested item.
- `itemprop` only: the element's value is added, then its children are walked.
- `itemscope` only: an unrelated item, its subtree is skipped.
- neither: the children are walked.

Nested items are not built recursively. A nested item is attached to its
parent as soon as its root is met, which fixes its position among the
parent's values, and its own properties are read later from a work list.
`build_item` returns only once that list is empty.
"""
from typing import Dict, List, Optional, Set, Tuple
import logging

from ..config import ParserOptions
from ..model import Item
from .tree import DocumentTree, Node
from .utils import resolve_url, split_tokens
from .values import ValueExtractor

logger = logging.getLogger(__name__)

# (item to fill, its root node, roots of the enclosing items plus its own)
_Job = Tuple[Item, int, Tuple[int, ...]]


class ScopeBuilder:

    def __init__(self, tree: DocumentTree, id_index: Dict[str, int], extractor: ValueExtractor,
                 options: Optional[ParserOptions] = None):
        self.tree = tree
        self.id_index = id_index
        self.extractor = extractor
        self.options = options or ParserOptions()

    def build_item(self, root: int) -> Item:
        item = self._new_item(self.tree[root])
        jobs: List[_Job] = [(item, root, (root,))]
        while jobs:
            current, index, chain = jobs.pop()
            self._read_properties(current, self.tree[index], chain, jobs)
        return item

    def _new_item(self, node: Node) -> Item:
        item = Item()
        for itemtype in split_tokens(node.get('itemtype')):
            item.add_type(itemtype)

        itemid = node.get('itemid')
        if itemid is not None and (item.types or not self.options.id_requires_type):
            item.id = resolve_url(self.extractor.base_url, itemid) or None
        return item

    def _pending(self, root: Node) -> List[int]:
        pending = []
        for ref in split_tokens(root.get('itemref')):
            target = self.id_index.get(ref)
            if target is None:
                logger.debug('itemref %r on node %d does not match any id', ref, root.index)
                continue
            pending.append(target)
        pending.extend(root.children)
        return pending

    def _read_properties(self, item: Item, root: Node, chain: Tuple[int, ...], jobs: List[_Job]) -> None:
        # the stack is popped from the end, so push in reverse
        stack = list(reversed(self._pending(root)))
        seen: Set[int] = set()
        while stack:
            index = stack.pop()
            if index in seen:
                continue
            seen.add(index)
            node = self.tree[index]
            if node.is_text:
                continue

            is_scope = node.has('itemscope')
            names = split_tokens(node.get('itemprop'))
            if is_scope and node.has('itemprop'):
                nested = self._nested_item(node, chain)
                if nested is not None and names:
                    for name in names:
                        item.add_property(name, nested)
                    jobs.append((nested, index, chain + (index,)))
                continue
            if is_scope and index != root.index:
                # unrelated item
                continue
            if names:
                value = self.extractor.value_of(node)
                if value is not None:
                    for name in names:
                        item.add_property(name, value)
            stack.extend(reversed(node.children))

    def _nested_item(self, node: Node, chain: Tuple[int, ...]) -> Optional[Item]:
        if node.index in chain:
            logger.warning('itemref cycle through node %d, nested item skipped', node.index)
            return None
        if len(chain) >= self.options.max_depth:
            logger.warning('Item nesting deeper than %d at node %d, nested item skipped',
                           self.options.max_depth, node.index)
            return None
        return self._new_item(node)
