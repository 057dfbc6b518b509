"""Tests for the Microdata / Item value objects and their projection."""
import json

import pytest

from microdata_scraper.engine import parse_html
from microdata_scraper.model import Item, Microdata


def test_canonical_projection():
    html = '''
    <div itemscope itemtype="http://example.com/Person">
      <p>My name is <span itemprop="name">Penelope</span>.</p>
    </div>'''
    data = parse_html(html, 'http://example.com')
    assert json.loads(data.to_json()) == {
        'items': [{'type': ['http://example.com/Person'], 'properties': {'name': ['Penelope']}}],
    }


def test_id_only_rendered_when_present():
    assert 'id' not in Item(types=['T']).to_dict()
    assert Item(types=['T'], id='urn:x').to_dict()['id'] == 'urn:x'
    assert Item(id='').id is None


def test_nested_items_render_recursively():
    inner = Item(types=['Inner'], properties={'n': ['1']}, id='urn:i')
    outer = Item(types=['Outer'], properties={'child': [inner, 'text']})
    assert outer.to_dict() == {
        'type': ['Outer'],
        'properties': {'child': [{'type': ['Inner'], 'properties': {'n': ['1']}, 'id': 'urn:i'}, 'text']},
    }


def test_round_trip_through_projection():
    html = (
        '<div itemscope itemtype="A B" itemid="/a">'
        '<span itemprop="z">1</span><span itemprop="a">2</span>'
        '<div itemprop="child" itemscope itemtype="C"><meta itemprop="m" content="x"></div>'
        '</div>'
    )
    data = parse_html(html, 'http://example.com')
    again = Microdata.from_json(data.to_json())
    assert again == data
    assert again.to_dict() == data.to_dict()
    assert list(again.items[0].properties) == ['z', 'a', 'child']


def test_equality_is_order_sensitive():
    a = Item(properties={'x': ['1'], 'y': ['2']})
    b = Item(properties={'y': ['2'], 'x': ['1']})
    assert a != b
    assert Item(types=['A', 'B']) != Item(types=['B', 'A'])
    assert Item(properties={'x': ['1', '2']}) != Item(properties={'x': ['2', '1']})


def test_only_strings_and_items_are_values():
    item = Item()
    with pytest.raises(TypeError):
        item.add_property('n', 3)
    with pytest.raises(TypeError):
        Item.from_dict({'type': [], 'properties': {'n': [3]}})


def test_accessors():
    item = Item(types=['T'], properties={'name': ['a', 'b']})
    data = Microdata([item, Item(types=['U'])])
    assert item.first('name') == 'a'
    assert item.first('missing') is None
    assert item.get('missing') == []
    assert data.items_of_type('T') == [item]
    assert len(data) == 2
