"""Property value extraction by element kind."""
from typing import Optional
import logging

from .tree import DocumentTree, Node
from .utils import resolve_url

logger = logging.getLogger(__name__)

# element kind -> (attribute, resolve as URL)
VALUE_ATTRIBUTES = {
    'meta': ('content', False),
    'audio': ('src', True),
    'embed': ('src', True),
    'iframe': ('src', True),
    'img': ('src', True),
    'source': ('src', True),
    'track': ('src', True),
    'video': ('src', True),
    'a': ('href', True),
    'area': ('href', True),
    'link': ('href', True),
    'data': ('value', False),
    'meter': ('value', False),
    'time': ('datetime', False),
}


class ValueExtractor:
    """Reads the value a property-bearing node contributes.

    Attribute-backed kinds return the attribute even when it is empty;
    the text fallback returns None for an empty result so that no
    property is recorded.
    """

    def __init__(self, tree: DocumentTree, base_url: Optional[str]):
        self.tree = tree
        self.base_url = base_url

    def value_of(self, node: Node) -> Optional[str]:
        spec = VALUE_ATTRIBUTES.get(node.kind)
        if spec is None:
            return self.tree.text_content(node.index) or None

        attr, is_url = spec
        value = node.get(attr)
        if value is None:
            logger.debug('<%s> property without %s attribute dropped', node.kind, attr)
            return None
        if is_url:
            return resolve_url(self.base_url, value)
        return value
