from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    GraphQLCompositeType,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    InlineFragmentNode,
)


@dataclass(frozen=True)
class FieldContext:
    node: FieldNode
    field: GraphQLField
    # graphql-core's GraphQLField does not know its own name
    field_name: str
    parent_type: GraphQLObjectType
    schema: GraphQLSchema


@dataclass(frozen=True)
class AbstractFieldContext:
    node: Union[FragmentDefinitionNode, InlineFragmentNode]
    abstract_type: GraphQLCompositeType
    concrete_type: GraphQLCompositeType
    field: GraphQLField
    schema: GraphQLSchema


GetFieldNameFunc = Callable[[FieldContext], Union[str, Sequence[str], None]]

GetExtraFieldsFunc = Callable[[FieldContext], Iterable[str]]

GetAbstractTypePathsFunc = Callable[[AbstractFieldContext, Callable[[], list[str]]], Iterable[str]]


@dataclass
class FieldMaskPathsOptions:
    """Extension points of the path extraction.

    ``get_field_name`` returns the mask name(s) of a field, or ``None`` to drop
    the field together with its sub-selection. ``get_extra_fields`` returns
    paths added next to the field as they are. ``get_abstract_type_paths``
    receives the narrowed member of a union or interface and a callable that
    computes the member's own paths; without it such fragments are ignored.
    """

    get_field_name: Optional[GetFieldNameFunc] = None
    get_extra_fields: Optional[GetExtraFieldsFunc] = None
    get_abstract_type_paths: Optional[GetAbstractTypePathsFunc] = None


def output_names(name: Union[str, Sequence[str]]) -> list[str]:
    return [name] if isinstance(name, str) else list(name)
