"""Microdata value objects.

`Microdata` holds the top-level items of one document. Each `Item` keeps
its types, its properties (name -> ordered values) and an optional id.
A property value is either a string or a nested `Item`; nothing else is
accepted.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

Value = Union[str, 'Item']


def _value_to_dict(value: Value) -> Any:
    if isinstance(value, Item):
        return value.to_dict()
    if isinstance(value, str):
        return value
    raise TypeError(f'Property values must be str or Item, got {type(value).__name__}')


def _value_from_dict(raw: Any) -> Value:
    if isinstance(raw, dict):
        return Item.from_dict(raw)
    if isinstance(raw, str):
        return raw
    raise TypeError(f'Cannot read property value of type {type(raw).__name__}')


class Item:
    """A microdata item.

    Items are filled in while their scope is being read and are treated
    as read-only once the builder returns them. Equality is order
    sensitive for types, property names and values.
    """

    __slots__ = ('types', 'properties', 'id')

    def __init__(self, types: Optional[List[str]] = None,
                 properties: Optional[Dict[str, List[Value]]] = None,
                 id: Optional[str] = None):
        self.types: List[str] = list(types or [])
        self.properties: Dict[str, List[Value]] = {}
        self.id = id or None
        for name, values in (properties or {}).items():
            for value in values:
                self.add_property(name, value)

    def add_type(self, value: str) -> None:
        self.types.append(value)

    def add_property(self, name: str, value: Value) -> None:
        if not isinstance(value, (str, Item)):
            raise TypeError(f'Property values must be str or Item, got {type(value).__name__}')
        self.properties.setdefault(name, []).append(value)

    def get(self, name: str) -> List[Value]:
        return self.properties.get(name, [])

    def first(self, name: str) -> Optional[Value]:
        values = self.properties.get(name)
        return values[0] if values else None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'type': list(self.types),
            'properties': {name: [_value_to_dict(v) for v in values]
                           for name, values in self.properties.items()},
        }
        if self.id:
            out['id'] = self.id
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        props = data.get('properties') or {}
        return cls(
            types=data.get('type') or [],
            properties={name: [_value_from_dict(v) for v in values] for name, values in props.items()},
            id=data.get('id'),
        )

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return (
            self.types == other.types
            and self.id == other.id
            and list(self.properties.items()) == list(other.properties.items())
        )

    __hash__ = None

    def __repr__(self):
        return f'Item(types={self.types!r}, properties={self.properties!r}, id={self.id!r})'


class Microdata:
    """Ordered list of the top-level items found in a document."""

    def __init__(self, items: Optional[List[Item]] = None):
        self.items: List[Item] = list(items or [])

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other):
        if not isinstance(other, Microdata):
            return NotImplemented
        return self.items == other.items

    __hash__ = None

    def items_of_type(self, type_url: str) -> List[Item]:
        return [item for item in self.items if type_url in item.types]

    def to_dict(self) -> Dict[str, Any]:
        return {'items': [item.to_dict() for item in self.items]}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Microdata':
        return cls([Item.from_dict(raw) for raw in data.get('items') or []])

    @classmethod
    def from_json(cls, text: str) -> 'Microdata':
        return cls.from_dict(json.loads(text))

    def __repr__(self):
        return f'Microdata(items={self.items!r})'


__all__ = ['Item', 'Microdata', 'Value']
