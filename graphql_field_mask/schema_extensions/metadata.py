from typing import Callable, Iterable, Optional, TypedDict, Union, cast

from graphql import GraphQLField, GraphQLNamedType
from graphql.pyutils import camel_to_snake

from graphql_field_mask.field_context import (
    AbstractFieldContext,
    FieldContext,
    GetAbstractTypePathsFunc,
)

# Key under which field mask settings live in `extensions` of schema elements:
#
#     GraphQLField(GraphQLString, extensions={'field_mask': {'field_name': 'display_name'}})
EXTENSIONS_KEY = 'field_mask'


class FieldMaskFieldMetadata(TypedDict, total=False):
    field_name: Union[str, list[str]]
    extra_fields: list[str]


class FieldMaskTypeMetadata(TypedDict, total=False):
    oneof_name: str


def get_field_mask_metadata_for_field(field: GraphQLField) -> Optional[FieldMaskFieldMetadata]:
    if field.extensions is not None:
        return cast(Optional[FieldMaskFieldMetadata], field.extensions.get(EXTENSIONS_KEY))
    else:
        return None


def get_field_mask_metadata_for_type(type_: GraphQLNamedType) -> Optional[FieldMaskTypeMetadata]:
    if type_.extensions is not None:
        return cast(Optional[FieldMaskTypeMetadata], type_.extensions.get(EXTENSIONS_KEY))
    else:
        return None


# Fields without metadata are left out of the mask.
def field_name_from_extensions(context: FieldContext) -> Union[str, list[str], None]:
    metadata = get_field_mask_metadata_for_field(context.field)
    if metadata is None:
        return None

    return metadata.get('field_name')


def extra_fields_from_extensions(context: FieldContext) -> list[str]:
    metadata = get_field_mask_metadata_for_field(context.field)
    if metadata is None:
        return []

    return list(metadata.get('extra_fields', []))


def get_oneof_name(context: AbstractFieldContext) -> Optional[str]:
    metadata = get_field_mask_metadata_for_type(context.concrete_type)
    if metadata is not None and 'oneof_name' in metadata:
        return metadata['oneof_name']

    return camel_to_snake(context.concrete_type.name)


def prefix_abstract_type_paths(
    get_prefix: Callable[[AbstractFieldContext], Optional[str]] = get_oneof_name,
) -> GetAbstractTypePathsFunc:
    """Build a hook mapping each member of a union or interface to its own
    sub-path, the way a protobuf ``oneof`` holds one message per member.

    ``get_prefix`` returns the path segment for the narrowed member, or
    ``None`` to leave the member out of the mask.
    """

    def get_abstract_type_paths(
        context: AbstractFieldContext, get_child_paths: Callable[[], list[str]]
    ) -> Iterable[str]:
        prefix = get_prefix(context)
        if prefix is None:
            return []

        return [f'{prefix}.{child_path}' for child_path in get_child_paths()]

    return get_abstract_type_paths
