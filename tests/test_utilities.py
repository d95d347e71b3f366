import pytest
from graphql import TypeKind

from graphql_field_mask.errors import NotAnObjectTypeError, UnknownTypeError
from graphql_field_mask.polyfill import flat_map
from graphql_field_mask.utilities.graphql_ import (
    get_field_def,
    get_type_kind,
    resolve_object_type,
    resolve_type,
)
from graphql_field_mask.utilities.ordered_set import OrderedSet


class TestOrderedSet:
    def test_keeps_first_occurrence_order(self):
        paths = OrderedSet(['b', 'a', 'b', 'c', 'a'])

        assert list(paths) == ['b', 'a', 'c']
        assert len(paths) == 3

    def test_add(self):
        paths = OrderedSet[str]()
        paths.add('x')
        paths.add('y')
        paths.add('x')

        assert list(paths) == ['x', 'y']
        assert 'y' in paths
        assert 'z' not in paths


def test_flat_map_keeps_strings_whole():
    assert flat_map(['a', 'b'], lambda name: [f'{name}.x', f'{name}.y']) == [
        'a.x',
        'a.y',
        'b.x',
        'b.y',
    ]
    assert flat_map(['a', 'b'], lambda name: name.upper()) == ['A', 'B']


class TestTypeResolver:
    def test_resolve_type(self, schema):
        assert resolve_type(schema, 'SearchResult') is schema.get_type('SearchResult')

    def test_resolve_unknown_type(self, schema):
        with pytest.raises(UnknownTypeError, match='Missing type is not found'):
            resolve_type(schema, 'Missing')

    def test_resolve_object_type(self, schema):
        assert resolve_object_type(schema, 'Photo') is schema.get_type('Photo')

    @pytest.mark.parametrize(
        'type_name,type_kind',
        [
            ('SearchResult', TypeKind.UNION),
            ('Node', TypeKind.INTERFACE),
            ('String', TypeKind.SCALAR),
        ],
    )
    def test_resolve_non_object_type(self, schema, type_name, type_kind):
        with pytest.raises(NotAnObjectTypeError) as exc_info:
            resolve_object_type(schema, type_name)

        assert exc_info.value.type_kind == type_kind
        assert exc_info.value.message == f'{type_name} is {type_kind.name}, but want OBJECT'

    def test_get_type_kind(self, schema):
        assert get_type_kind(schema.get_type('Photo')) == TypeKind.OBJECT

    def test_get_field_def(self, schema):
        photo = schema.get_type('Photo')

        assert get_field_def(photo, 'url') is photo.fields['url']
        assert get_field_def(photo, 'title') is None
