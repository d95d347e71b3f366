import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union, cast

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLField,
    GraphQLResolveInfo,
    GraphQLSchema,
    InlineFragmentNode,
    get_named_type,
    is_abstract_type,
)

from graphql_field_mask.errors import (
    FragmentCycleError,
    UnknownFieldError,
    UnknownFragmentError,
)
from graphql_field_mask.field_context import (
    AbstractFieldContext,
    FieldContext,
    FieldMaskPathsOptions,
    output_names,
)
from graphql_field_mask.polyfill import flat_map
from graphql_field_mask.utilities.graphql_ import (
    get_field_def,
    get_type_condition_name,
    resolve_object_type,
    resolve_type,
)
from graphql_field_mask.utilities.ordered_set import OrderedSet

logger = logging.getLogger(__name__)

FragmentName = str

FragmentMap = dict[FragmentName, FragmentDefinitionNode]

# Nodes whose selection set is walked: the top-level field nodes, fragment
# definitions and inline fragments.
SelectionContainer = Union[FieldNode, FragmentDefinitionNode, InlineFragmentNode]


@dataclass
class FieldMaskContext:
    schema: GraphQLSchema
    fragments: FragmentMap
    options: FieldMaskPathsOptions
    # fragments being expanded on the current recursion path
    expanding_fragments: list[FragmentName] = field(default_factory=list)


def field_mask_paths_from_resolve_info(
    typename: str,
    info: GraphQLResolveInfo,
    options: Optional[FieldMaskPathsOptions] = None,
) -> list[str]:
    return compute_field_mask_paths(
        typename, info.field_nodes, info.fragments, info.schema, options
    )


def compute_field_mask_paths(
    typename: str,
    selection_nodes: Iterable[SelectionContainer],
    fragments: FragmentMap,
    schema: GraphQLSchema,
    options: Optional[FieldMaskPathsOptions] = None,
) -> list[str]:
    """Compute the field mask paths selected by the given nodes.

    ``selection_nodes`` are usually all the AST occurrences of the resolved
    field (``info.field_nodes``) and their selections are read as fields of the
    object type named ``typename``. The result keeps the order in which paths
    are first met and holds no duplicates.
    """
    if options is None:
        options = FieldMaskPathsOptions()

    context = FieldMaskContext(schema=schema, fragments=fragments, options=options)

    # Fail on an unknown root type even when nothing below would look it up.
    resolve_type(schema, typename)

    selection_nodes = list(selection_nodes)
    logger.debug('Computing field mask paths for %s (%d nodes)', typename, len(selection_nodes))

    paths = OrderedSet[str]()
    for node in selection_nodes:
        paths.update(collect_paths(context, typename, None, node))

    logger.debug('Computed %d field mask paths for %s', len(paths), typename)
    return list(paths)


def collect_paths(
    context: FieldMaskContext,
    typename: str,
    current_field: Optional[GraphQLField],
    node: SelectionContainer,
) -> list[str]:
    if node.selection_set is None:
        return []

    paths: list[str] = []

    for selection in node.selection_set.selections:
        if selection.kind == FieldNode.kind:
            paths.extend(collect_field_paths(context, typename, cast(FieldNode, selection)))
        elif selection.kind == FragmentSpreadNode.kind:
            selection = cast(FragmentSpreadNode, selection)
            fragment_name = selection.name.value

            fragment = context.fragments.get(fragment_name)
            if fragment is None:
                raise UnknownFragmentError(fragment_name, selection)

            if fragment_name in context.expanding_fragments:
                raise FragmentCycleError(fragment_name, selection)

            context.expanding_fragments.append(fragment_name)
            try:
                paths.extend(
                    collect_fragment_paths(
                        context,
                        typename,
                        current_field,
                        fragment.type_condition.name.value,
                        fragment,
                    )
                )
            finally:
                context.expanding_fragments.pop()
        elif selection.kind == InlineFragmentNode.kind:
            selection = cast(InlineFragmentNode, selection)
            paths.extend(
                collect_fragment_paths(
                    context,
                    typename,
                    current_field,
                    # An inline fragment without type condition narrows nothing.
                    get_type_condition_name(selection, typename),
                    selection,
                )
            )
        else:
            raise Exception(f'programming error: unexpected selection {selection.kind}')

    return paths


def collect_field_paths(
    context: FieldMaskContext, typename: str, selection: FieldNode
) -> list[str]:
    field_name = selection.name.value

    if field_name == '__typename':
        return []

    schema = context.schema
    options = context.options

    parent_type = resolve_object_type(schema, typename, selection)
    field_def = get_field_def(parent_type, field_name)
    if field_def is None:
        raise UnknownFieldError(typename, field_name, selection)

    field_context = FieldContext(
        node=selection,
        field=field_def,
        field_name=field_name,
        parent_type=parent_type,
        schema=schema,
    )

    paths: list[str] = []

    if options.get_extra_fields is not None:
        paths.extend(options.get_extra_fields(field_context))

    if options.get_field_name is not None:
        name = options.get_field_name(field_context)
        if name is None:
            logger.debug('Skipping %s.%s: no field mask name', typename, field_name)
            return paths
        names = output_names(name)
    else:
        # Aliases only rename the response key, the mask uses schema names.
        names = [field_name]

    if selection.selection_set is None:
        paths.extend(names)
        return paths

    child_typename = get_named_type(field_def.type).name
    child_paths = collect_paths(context, child_typename, field_def, selection)

    paths.extend(
        flat_map(names, lambda name_: [f'{name_}.{child_path}' for child_path in child_paths])
    )
    return paths


def collect_fragment_paths(
    context: FieldMaskContext,
    typename: str,
    current_field: Optional[GraphQLField],
    fragment_typename: str,
    node: Union[FragmentDefinitionNode, InlineFragmentNode],
) -> list[str]:
    schema = context.schema
    options = context.options

    fragment_type = resolve_type(schema, fragment_typename, node)
    current_type = resolve_type(schema, typename, node)

    if is_abstract_type(current_type):
        if fragment_typename == typename:
            # The fragment selects fields of the abstract type itself. Member
            # fields are not merged in.
            return collect_paths(context, typename, current_field, node)

        if options.get_abstract_type_paths is None:
            logger.debug(
                'Ignoring fragment on %s inside abstract type %s', fragment_typename, typename
            )
            return []

        if current_field is None:
            raise Exception(
                f'programming error: fragment on {fragment_typename} narrows abstract type '
                f'{typename} without an enclosing field'
            )

        abstract_context = AbstractFieldContext(
            node=node,
            abstract_type=current_type,
            concrete_type=fragment_type,
            field=current_field,
            schema=schema,
        )

        def get_child_paths() -> list[str]:
            return collect_paths(context, fragment_typename, current_field, node)

        return list(options.get_abstract_type_paths(abstract_context, get_child_paths))

    if fragment_typename != typename and not is_abstract_type(fragment_type):
        logger.debug(
            'Ignoring fragment on %s inside unrelated type %s', fragment_typename, typename
        )
        return []

    return collect_paths(context, typename, current_field, node)

