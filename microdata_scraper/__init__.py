"""microdata_scraper package init.

Exposes the parser entry points and the model classes. This module also
configures a small warnings filter to silence a known DeprecationWarning
emitted by BeautifulSoup's lxml builder on some versions of lxml.
"""
import warnings

# Suppress lxml HTMLParser 'strip_cdata' deprecation noise coming from
# BeautifulSoup's lxml builder internals. The message text can vary
# between versions, so match substring with a regex.
warnings.filterwarnings(
    "ignore",
    category=DeprecationWarning,
    message=r".*strip_cdata.*",
)

from .config import ParserOptions  # noqa: E402
from .engine import MicrodataParser, parse_html, parse_url  # noqa: E402
from .model import Item, Microdata  # noqa: E402

__all__ = [
    "Item",
    "Microdata",
    "MicrodataParser",
    "ParserOptions",
    "parse_html",
    "parse_url",
]
