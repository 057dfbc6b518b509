"""Flat, read-only view of a parsed document.

`DocumentTree.from_soup` copies the BeautifulSoup tree into a list of
`Node` records in document pre-order. Node indices are the handles used
everywhere else (id index, top-level roots, traversal stacks), and the
descendants of a node always occupy the contiguous index range
``index + 1 .. node.end``.
"""
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .utils import make_soup

DOCUMENT = '#document'
TEXT = '#text'


class Node:
    __slots__ = ('index', 'kind', 'attrs', 'parent', 'children', 'text', 'end')

    def __init__(self, index: int, kind: str, attrs: Tuple[Tuple[str, str], ...] = (),
                 parent: Optional[int] = None, text: str = ''):
        self.index = index
        self.kind = kind
        self.attrs = attrs
        self.parent = parent
        self.children: List[int] = []
        self.text = text
        self.end = index + 1

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT

    def get(self, name: str) -> Optional[str]:
        """Return the first value of attribute `name`, or None when absent."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def has(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    def __repr__(self):
        return f'<Node {self.index} {self.kind}>'


def _attr_pairs(tag: Tag) -> Tuple[Tuple[str, str], ...]:
    pairs = []
    seen = set()
    for key, value in tag.attrs.items():
        key = key.lower()
        if key in seen:
            continue
        seen.add(key)
        if isinstance(value, list):
            value = ' '.join(value)
        pairs.append((key, value if value is not None else ''))
    return tuple(pairs)


class DocumentTree:
    """Arena of document nodes; index 0 is the document itself."""

    def __init__(self, nodes: List[Node]):
        self.nodes = nodes

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def descendants(self, index: int) -> List[Node]:
        """All descendants of node `index` in document order."""
        return self.nodes[index + 1:self.nodes[index].end]

    def text_content(self, index: int) -> str:
        return ''.join(n.text for n in self.descendants(index) if n.is_text)

    def find_first(self, kind: str) -> Optional[Node]:
        for node in self.nodes:
            if node.kind == kind:
                return node
        return None

    @classmethod
    def from_soup(cls, soup: BeautifulSoup) -> 'DocumentTree':
        """Copy a BeautifulSoup tree into a pre-order node arena.

        Comments, doctypes, CDATA and processing instructions are not
        copied; script and style contents are kept as text.
        """
        nodes: List[Node] = [Node(0, DOCUMENT)]
        # explicit stack so deeply nested markup cannot exhaust the interpreter stack
        stack = [(child, 0) for child in reversed(list(soup.children))]
        while stack:
            element, parent = stack.pop()
            if isinstance(element, Tag):
                node = Node(len(nodes), (element.name or '').lower(), _attr_pairs(element), parent)
                stack.extend((child, node.index) for child in reversed(list(element.children)))
            elif isinstance(element, NavigableString) and not isinstance(element, PreformattedString):
                node = Node(len(nodes), TEXT, parent=parent, text=str(element))
            else:
                continue
            nodes.append(node)
            nodes[parent].children.append(node.index)

        # subtree ends, children before parents
        for node in reversed(nodes):
            if node.children:
                node.end = nodes[node.children[-1]].end
        return cls(nodes)

    @classmethod
    def from_markup(cls, markup, parser: str = 'lxml', from_encoding: Optional[str] = None) -> 'DocumentTree':
        return cls.from_soup(make_soup(markup, parser=parser, from_encoding=from_encoding))
