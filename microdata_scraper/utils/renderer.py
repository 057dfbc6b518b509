"""Headless Chrome loader for documents whose microdata is added by scripts.

`render_url()` starts a temporary Chrome instance through
`webdriver-manager`, waits for the page to settle and returns the URL the
browser ended on together with the rendered source. Viewport, page load
timeout and settle time come from `microdata_scraper.config`.
"""
from typing import Optional, Tuple
import logging
import time

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from .. import config

logger = logging.getLogger(__name__)

CHROME_FLAGS = ('--no-sandbox', '--disable-dev-shm-usage', '--disable-gpu')


def window_size(value: str) -> Tuple[int, int]:
    """Parse a 'WIDTHxHEIGHT' viewport setting."""
    width, _, height = value.strip().lower().partition('x')
    try:
        size = int(width), int(height)
    except ValueError:
        raise ValueError(f'Render window must look like 1366x900, got {value!r}') from None
    if min(size) <= 0:
        raise ValueError(f'Render window must be positive, got {value!r}')
    return size


def chrome_options(headless: bool = True, window: Optional[str] = None) -> Options:
    width, height = window_size(window or config.RENDER_WINDOW)
    opts = Options()
    if headless:
        opts.add_argument('--headless=new')
    opts.add_argument(f'--window-size={width},{height}')
    for flag in CHROME_FLAGS:
        opts.add_argument(flag)
    return opts


def render_url(url: str, wait: Optional[float] = None, headless: bool = True,
               timeout: Optional[int] = None) -> Tuple[str, str]:
    """Return ``(final_url, page_source)`` for `url` as Chrome renders it."""
    wait = config.RENDER_WAIT if wait is None else wait
    service = Service(ChromeDriverManager().install())
    driver = webdriver.Chrome(service=service, options=chrome_options(headless=headless))
    try:
        driver.set_page_load_timeout(timeout or config.RENDER_TIMEOUT)
        driver.get(url)
        if wait:
            time.sleep(wait)
        final_url = driver.current_url or url
        if final_url != url:
            logger.debug('Browser redirected %s -> %s', url, final_url)
        return final_url, driver.page_source
    finally:
        try:
            driver.quit()
        except WebDriverException as exc:
            logger.debug('Chrome did not quit cleanly: %s', exc)
