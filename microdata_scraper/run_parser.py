"""Command line runner: print the microdata of a document as JSON.

Provide a URL to fetch, or stream an HTML document through stdin:

    microdata https://example.com/recipe
    microdata --base-url https://example.com/ < page.html
"""
from typing import List, Optional
import argparse
import logging
import sys

import requests
from selenium.common.exceptions import WebDriverException

from . import config
from .config import ParserOptions
from .engine import MicrodataParser

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='microdata',
        description='Extract the HTML microdata from an HTML5 document. Provide a URL to a '
                    'document or stream a document through stdin.',
    )
    parser.add_argument('url', nargs='?', help='URL of the document to fetch (default: read stdin)')
    parser.add_argument('--base-url', default='http://example.com',
                        help='base URL for the document read from stdin')
    parser.add_argument('--content-type', default=None,
                        help='content type of the stdin stream, e.g. "text/html; charset=latin-1"')
    parser.add_argument('--parser', choices=('lxml', 'html5lib', 'html.parser'), default=config.PARSER,
                        help='BeautifulSoup tree builder')
    parser.add_argument('--render', action='store_true', help='Load the URL in headless Chrome (slow)')
    parser.add_argument('--id-requires-type', action='store_true', default=config.ID_REQUIRES_TYPE,
                        help='only record itemid on items that declare an itemtype')
    parser.add_argument('--indent', type=int, default=2, help='JSON indentation')
    parser.add_argument('--verbose', '-v', action='store_true', help='log progress to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    options = ParserOptions(parser=args.parser, id_requires_type=args.id_requires_type)
    md_parser = MicrodataParser(options)
    try:
        if args.url:
            data = md_parser.parse_url(args.url, render=args.render)
        else:
            data = md_parser.parse_html(sys.stdin.buffer.read(), args.base_url, args.content_type)
    except (requests.RequestException, WebDriverException, ValueError) as e:
        logger.debug('Extraction failed', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    sys.stdout.write(data.to_json(indent=args.indent) + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
