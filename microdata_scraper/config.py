"""Runtime configuration for the microdata parser.

Settings are read from environment variables once at import time. The
extraction-related ones are bundled into `ParserOptions`, which callers
may also build explicitly to override the environment.
"""
from dataclasses import dataclass
import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Tree builder handed to BeautifulSoup: 'lxml', 'html5lib' or 'html.parser'
PARSER = os.environ.get('MICRODATA_PARSER', 'lxml')
# Only record itemid on items that declare an itemtype
ID_REQUIRES_TYPE = _env_flag('MICRODATA_ID_REQUIRES_TYPE', '0')
# Let the first <base href> override the caller supplied document URL
HONOR_BASE_ELEMENT = _env_flag('MICRODATA_HONOR_BASE_ELEMENT', '1')
# Maximum nesting of items before deeper scopes are dropped
MAX_DEPTH = int(os.environ.get('MICRODATA_MAX_DEPTH', '256'))

# fetching (seconds)
HTTP_TIMEOUT = float(os.environ.get('MICRODATA_HTTP_TIMEOUT', '15'))
RENDER_WAIT = float(os.environ.get('MICRODATA_RENDER_WAIT', '1.0'))
RENDER_TIMEOUT = int(os.environ.get('MICRODATA_RENDER_TIMEOUT', '30'))
# headless Chrome viewport, WIDTHxHEIGHT
RENDER_WINDOW = os.environ.get('MICRODATA_RENDER_WINDOW', '1366x900')
USER_AGENT = os.environ.get(
    'MICRODATA_USER_AGENT',
    'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) '
    'Chrome/120.0.0.0 Safari/537.36',
)


@dataclass
class ParserOptions:
    """Extraction settings for a single parse call."""

    parser: str = PARSER
    id_requires_type: bool = ID_REQUIRES_TYPE
    honor_base_element: bool = HONOR_BASE_ELEMENT
    max_depth: int = MAX_DEPTH

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f'max_depth must be positive, got {self.max_depth}')
