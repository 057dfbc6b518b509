"""Tests for the command line runner."""
import io
import json
import sys

import pytest
import requests

from microdata_scraper import run_parser
from microdata_scraper.utils import fetcher


def feed_stdin(monkeypatch, data: bytes):
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(data)))


def test_stdin_to_json(monkeypatch, capsys):
    feed_stdin(monkeypatch, b'<div itemscope itemtype="T" itemid="x"><a itemprop="u" href="/a">a</a></div>')
    assert run_parser.main(['--base-url', 'http://example.org/', '--indent', '0']) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {'items': [{'type': ['T'], 'properties': {'u': ['http://example.org/a']},
                              'id': 'http://example.org/x'}]}


def test_id_requires_type_flag(monkeypatch, capsys):
    feed_stdin(monkeypatch, b'<div itemscope itemid="urn:x"></div>')
    assert run_parser.main(['--id-requires-type']) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {'items': [{'type': [], 'properties': {}}]}


def test_stdin_with_content_type(monkeypatch, capsys):
    feed_stdin(monkeypatch, '<div itemscope><span itemprop="n">Müller</span></div>'.encode('latin-1'))
    assert run_parser.main(['--content-type', 'charset=latin-1', '--parser', 'html.parser']) == 0
    out = json.loads(capsys.readouterr().out)
    assert out['items'][0]['properties']['n'] == ['Müller']


def test_fetch_failure_exits_nonzero(monkeypatch, capsys):
    def boom(url, **kwargs):
        raise requests.ConnectionError('connection refused')

    monkeypatch.setattr(fetcher.requests, 'get', boom)
    assert run_parser.main(['http://example.invalid/']) == 1
    assert 'connection refused' in capsys.readouterr().err


def test_output_is_always_json(monkeypatch):
    feed_stdin(monkeypatch, b'<div itemscope></div>')
    with pytest.raises(SystemExit) as exc:
        run_parser.main(['--format', '{{ . }}'])
    assert exc.value.code == 2
