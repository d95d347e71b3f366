from typing import Optional, Union

from graphql import (
    FragmentDefinitionNode,
    GraphQLField,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    InlineFragmentNode,
    Node,
    TypeKind,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_union_type,
)

from graphql_field_mask.errors import NotAnObjectTypeError, UnknownTypeError


def resolve_type(
    schema: GraphQLSchema, type_name: str, node: Optional[Node] = None
) -> GraphQLNamedType:
    type_ = schema.get_type(type_name)
    if type_ is None:
        raise UnknownTypeError(type_name, node)

    return type_


def resolve_object_type(
    schema: GraphQLSchema, type_name: str, node: Optional[Node] = None
) -> GraphQLObjectType:
    type_ = resolve_type(schema, type_name, node)
    if not is_object_type(type_):
        raise NotAnObjectTypeError(type_name, get_type_kind(type_), node)

    return type_


# Same classification the introspection `__Type.kind` field reports.
def get_type_kind(type_: GraphQLNamedType) -> TypeKind:
    if is_object_type(type_):
        return TypeKind.OBJECT
    if is_interface_type(type_):
        return TypeKind.INTERFACE
    if is_union_type(type_):
        return TypeKind.UNION
    if is_enum_type(type_):
        return TypeKind.ENUM
    if is_input_object_type(type_):
        return TypeKind.INPUT_OBJECT

    return TypeKind.SCALAR


# Unlike the executor's getFieldDef, meta fields are never resolved here:
# `__typename` is filtered out before lookup and introspection fields have no
# place in a field mask.
def get_field_def(parent_type: GraphQLObjectType, field_name: str) -> Optional[GraphQLField]:
    return parent_type.fields.get(field_name)


def get_type_condition_name(
    fragment: Union[FragmentDefinitionNode, InlineFragmentNode], default: str
) -> str:
    return fragment.type_condition.name.value if fragment.type_condition is not None else default
