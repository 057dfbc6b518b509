"""Shared parsing utilities for the extraction passes.

Provides a single `make_soup` helper so documents are parsed
consistently, plus the token-list and URL helpers used when reading
microdata attributes.
"""
from typing import List, Optional, Union
import logging
import re
import warnings
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup
from packaging.version import parse as parse_version
from requests.utils import get_encoding_from_headers

logger = logging.getLogger(__name__)

# HTML "ASCII whitespace": space, tab, LF, FF, CR
_RE_ASCII_WHITESPACE = re.compile(r'[ \t\n\f\r]+')

SUPPORTED_PARSERS = ('lxml', 'html5lib', 'html.parser')


def make_soup(markup: Union[str, bytes], parser: str = 'lxml', from_encoding: Optional[str] = None) -> BeautifulSoup:
    """Parse HTML using BeautifulSoup, `lxml` backend by default.

    Attribute values are kept as plain strings (no multi-valued `class`
    lists). With `html.parser` the first of a duplicated attribute wins,
    which is what the other two builders already do.

    Suppresses known DeprecationWarning from lxml HTMLParser regarding
    'strip_cdata' option in BeautifulSoup 4.12+ with lxml 4.9+.
    """
    if parser not in SUPPORTED_PARSERS:
        raise ValueError(f'Unsupported parser {parser!r}, expected one of {SUPPORTED_PARSERS}')
    if not isinstance(markup, (str, bytes)):
        raise ValueError(f'Invalid HTML input of type {type(markup).__name__}')

    kwargs = {'multi_valued_attributes': None}
    if isinstance(markup, bytes) and from_encoding:
        kwargs['from_encoding'] = from_encoding
    if parser == 'html.parser':
        kwargs['on_duplicate_attribute'] = 'ignore'

    bs_version = getattr(BeautifulSoup, '__version__', None)
    suppress_warning = False
    if bs_version:
        suppress_warning = parse_version(bs_version) >= parse_version('4.12')

    if parser == 'lxml' and suppress_warning:
        with warnings.catch_warnings():
            warnings.filterwarnings(
                "ignore",
                category=DeprecationWarning,
                message=r".*The 'strip_cdata' option of HTMLParser.*",
                module=r".*_lxml.*",
            )
            return BeautifulSoup(markup, parser, **kwargs)
    return BeautifulSoup(markup, parser, **kwargs)


def charset_from_content_type(content_type: Optional[str]) -> Optional[str]:
    """Return the charset declared in a Content-Type value, if any.

    Only an explicit `charset=` parameter counts; the HTTP default of
    ISO-8859-1 for text/* is left to BeautifulSoup's own detection.
    """
    if not content_type or 'charset' not in content_type.lower():
        return None
    # a bare "charset=utf-8" (no media type) is accepted too
    if ';' not in content_type and content_type.lower().startswith('charset'):
        content_type = 'text/html; ' + content_type
    return get_encoding_from_headers({'content-type': content_type})


def split_tokens(value: Optional[str]) -> List[str]:
    """Split an unordered set of space-separated tokens, keeping order and duplicates."""
    if not value:
        return []
    return [t for t in _RE_ASCII_WHITESPACE.split(value) if t]


def resolve_url(base_url: Optional[str], value: str) -> Optional[str]:
    """Resolve `value` against `base_url`; None when it cannot be resolved."""
    value = value.strip(' \t\n\f\r')
    try:
        joined = urljoin(base_url or '', value)
        # urljoin is lazy about the netloc; force validation of host and port
        parts = urlsplit(joined)
        parts.port
    except ValueError as exc:
        logger.debug('Cannot resolve URL %r against %r: %s', value, base_url, exc)
        return None
    return joined
