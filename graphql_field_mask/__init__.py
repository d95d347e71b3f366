from typing import Iterable, Optional

from graphql import GraphQLResolveInfo, GraphQLSchema

from graphql_field_mask.compute_field_mask_paths import (
    FragmentMap,
    SelectionContainer,
    compute_field_mask_paths,
    field_mask_paths_from_resolve_info,
)
from graphql_field_mask.errors import (
    FieldMaskError,
    FragmentCycleError,
    NotAnObjectTypeError,
    UnknownFieldError,
    UnknownFragmentError,
    UnknownTypeError,
)
from graphql_field_mask.field_context import (
    AbstractFieldContext,
    FieldContext,
    FieldMaskPathsOptions,
)
from graphql_field_mask.schema_extensions.metadata import (
    extra_fields_from_extensions,
    field_name_from_extensions,
    prefix_abstract_type_paths,
)
from graphql_field_mask.utilities.ordered_set import OrderedSet


class FieldMaskExtractor:
    # Binds the options once so resolvers only pass what changes per request.

    options: FieldMaskPathsOptions

    def __init__(self, options: Optional[FieldMaskPathsOptions] = None):
        self.options = options if options is not None else FieldMaskPathsOptions()

    def compute(
        self,
        typename: str,
        selection_nodes: Iterable[SelectionContainer],
        fragments: FragmentMap,
        schema: GraphQLSchema,
    ) -> list[str]:
        return compute_field_mask_paths(typename, selection_nodes, fragments, schema, self.options)

    def from_resolve_info(self, typename: str, info: GraphQLResolveInfo) -> list[str]:
        return field_mask_paths_from_resolve_info(typename, info, self.options)


__all__ = [
    'AbstractFieldContext',
    'FieldContext',
    'FieldMaskError',
    'FieldMaskExtractor',
    'FieldMaskPathsOptions',
    'FragmentCycleError',
    'NotAnObjectTypeError',
    'OrderedSet',
    'UnknownFieldError',
    'UnknownFragmentError',
    'UnknownTypeError',
    'compute_field_mask_paths',
    'extra_fields_from_extensions',
    'field_mask_paths_from_resolve_info',
    'field_name_from_extensions',
    'prefix_abstract_type_paths',
]
