"""Tests for the parser entry points against saved samples."""
from pathlib import Path

from microdata_scraper.config import ParserOptions
from microdata_scraper.engine import MicrodataParser, document_base_url, parse_html
from microdata_scraper.extract.tree import DocumentTree
from microdata_scraper.model import Item

SAMPLES = Path(__file__).resolve().parent.parent / 'samples'


def load_sample(name: str) -> bytes:
    return (SAMPLES / name).read_bytes()


def test_blogposting_sample():
    data = MicrodataParser().parse_file(SAMPLES / 'blogposting.html', base_url='http://example.com/blog/')
    assert len(data.items) == 1
    post = data.items[0]
    assert post.types == ['http://schema.org/BlogPosting']
    assert post.id == 'http://example.com/posts/first-post'
    assert list(post.properties) == ['headline', 'datePublished', 'image', 'author', 'articleBody', 'comment']
    assert post.properties['headline'] == ['The first post']
    assert post.properties['datePublished'] == ['2015-03-09']
    assert post.properties['image'] == ['http://example.com/images/cover.png']
    assert post.first('articleBody').strip() == 'Hello world.'

    author = post.first('author')
    assert isinstance(author, Item)
    assert author.properties['name'] == ['Lars Wiegman']
    assert author.properties['url'] == ['http://example.com/about']

    comment = post.first('comment')
    assert comment.first('creator').properties == {'name': ['Penelope']}
    assert comment.properties['commentTime'] == ['2015-03-10']


def test_parse_file_defaults_to_file_url():
    data = MicrodataParser().parse_file(SAMPLES / 'blogposting.html')
    assert data.items[0].id.startswith('file://')
    assert data.items[0].id.endswith('/posts/first-post')


def test_bytes_decoded_with_declared_charset():
    html = load_sample('latin1.html')
    data = parse_html(html, 'http://example.com', content_type='text/html; charset=iso-8859-1')
    assert data.items[0].properties['name'] == ['Café Müller']


def test_parse_samples():
    results = MicrodataParser().parse_samples(SAMPLES)
    assert set(results) == {'blogposting.html', 'latin1.html', 'movie_itemref.html'}
    movie = results['movie_itemref.html'].items[0]
    assert movie.properties['genre'] == ['Thriller']


def test_base_element_overrides_document_url():
    html = '<head><base href="http://other.example/dir/"></head><div itemscope><a itemprop="u" href="page">p</a></div>'
    assert parse_html(html, 'http://example.com/').items[0].properties['u'] == ['http://other.example/dir/page']
    plain = parse_html(html, 'http://example.com/', options=ParserOptions(honor_base_element=False))
    assert plain.items[0].properties['u'] == ['http://example.com/page']


def test_document_base_url_uses_first_base_with_href():
    tree = DocumentTree.from_markup('<head><base target="_blank"><base href="/b/"><base href="/c/"></head>')
    assert document_base_url(tree, 'http://example.com/a') == 'http://example.com/b/'
    assert document_base_url(DocumentTree.from_markup('<p>x</p>'), 'http://example.com/a') == 'http://example.com/a'


def test_document_without_items():
    data = parse_html('<p>nothing here</p>', 'http://example.com')
    assert data.items == []
    assert data.to_dict() == {'items': []}
