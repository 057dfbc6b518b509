"""Document retrieval for the parser.

`fetch_static()` downloads a page with `requests`; `fetch_rendered()`
loads it in headless Chrome through the Selenium renderer for pages
that build their markup with JavaScript. Both return a `FetchedPage`
with the final URL, which becomes the document's base URL.
"""
from typing import NamedTuple, Optional, Union
import logging

import requests

from .. import config

logger = logging.getLogger(__name__)


class FetchedPage(NamedTuple):
    url: str
    content: Union[str, bytes]
    content_type: Optional[str]


def _headers():
    return {
        'User-Agent': config.USER_AGENT,
        'Accept': 'text/html,application/xhtml+xml;q=0.9,*/*;q=0.8',
    }


def fetch_static(url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None) -> FetchedPage:
    """GET `url` and return the raw body; HTTP errors raise `requests.HTTPError`."""
    getter = session.get if session is not None else requests.get
    r = getter(url, headers=_headers(), timeout=timeout or config.HTTP_TIMEOUT, allow_redirects=True)
    r.raise_for_status()
    logger.info('Fetched %s (%d bytes, %s)', r.url, len(r.content), r.headers.get('Content-Type'))
    return FetchedPage(r.url or url, r.content, r.headers.get('Content-Type'))


def fetch_rendered(url: str, wait: Optional[float] = None) -> FetchedPage:
    """Load `url` in headless Chrome and return the rendered page source."""
    # Selenium is only imported when rendering is requested
    from .renderer import render_url

    final_url, html = render_url(url, wait=wait)
    logger.info('Rendered %s (%d chars)', final_url, len(html))
    return FetchedPage(final_url, html, 'text/html; charset=utf-8')
