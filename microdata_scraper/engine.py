"""Microdata parser entry points.

`MicrodataParser` ties the extraction passes together: the document is
copied into a node arena, ids and top-level roots are found in one scan
and each root is turned into an `Item`. HTML can come from a string,
bytes, a BeautifulSoup object, a file or a URL.

Example usage:
    parser = MicrodataParser()
    data = parser.parse_html(html, 'https://example.com/page')
    print(data.to_json(indent=2))
"""
from typing import Dict, Optional, Union
from pathlib import Path
import logging

from bs4 import BeautifulSoup

from .config import ParserOptions
from .extract import DocumentTree, ScopeBuilder, ValueExtractor, scan_document
from .extract.utils import charset_from_content_type, make_soup, resolve_url
from .model import Microdata
from .utils.fetcher import fetch_rendered, fetch_static

logger = logging.getLogger(__name__)


def document_base_url(tree: DocumentTree, url: Optional[str]) -> Optional[str]:
    """The URL relative references resolve against.

    The first `<base>` element with an `href` overrides `url`; an href
    that cannot be resolved is ignored.
    """
    for node in tree:
        if node.kind == 'base' and node.has('href'):
            resolved = resolve_url(url, node.get('href'))
            if resolved:
                return resolved
            logger.debug('Ignoring unusable <base href=%r>', node.get('href'))
            break
    return url


class MicrodataParser:
    """Extracts the microdata items of HTML documents."""

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or ParserOptions()

    def parse_tree(self, tree: DocumentTree, base_url: Optional[str]) -> Microdata:
        if self.options.honor_base_element:
            base_url = document_base_url(tree, base_url)
        # fresh per document; never shared between calls
        id_index, roots = scan_document(tree)
        builder = ScopeBuilder(tree, id_index, ValueExtractor(tree, base_url), self.options)

        data = Microdata()
        for root in roots:
            data.add_item(builder.build_item(root))
        logger.debug('Found %d top-level items in %d nodes', len(data), len(tree))
        return data

    def parse_soup(self, soup: BeautifulSoup, base_url: Optional[str]) -> Microdata:
        return self.parse_tree(DocumentTree.from_soup(soup), base_url)

    def parse_html(self, markup: Union[str, bytes], base_url: Optional[str],
                   content_type: Optional[str] = None) -> Microdata:
        """Parse `markup`; for bytes, the charset in `content_type` picks the decoding."""
        soup = make_soup(markup, parser=self.options.parser,
                         from_encoding=charset_from_content_type(content_type))
        return self.parse_soup(soup, base_url)

    def parse_file(self, file_path: Path, base_url: Optional[str] = None) -> Microdata:
        file_path = Path(file_path)
        if base_url is None:
            base_url = file_path.resolve().as_uri()
        return self.parse_html(file_path.read_bytes(), base_url)

    def parse_url(self, url: str, render: bool = False) -> Microdata:
        page = fetch_rendered(url) if render else fetch_static(url)
        return self.parse_html(page.content, page.url, page.content_type)

    def parse_samples(self, samples_dir: Path) -> Dict[str, Microdata]:
        out = {}
        for p in sorted(Path(samples_dir).glob('*.html')):
            out[p.name] = self.parse_file(p)
        return out


def parse_html(markup: Union[str, bytes], base_url: Optional[str], content_type: Optional[str] = None,
               options: Optional[ParserOptions] = None) -> Microdata:
    return MicrodataParser(options).parse_html(markup, base_url, content_type)


def parse_url(url: str, render: bool = False, options: Optional[ParserOptions] = None) -> Microdata:
    return MicrodataParser(options).parse_url(url, render=render)
