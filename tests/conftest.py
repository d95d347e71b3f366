from typing import Callable, Optional, cast

import pytest
from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    GraphQLSchema,
    OperationDefinitionNode,
    build_schema,
    parse,
)

from graphql_field_mask import FieldMaskPathsOptions, compute_field_mask_paths

SDL = """
    type Query {
        object1: Object1
        parent: Parent
        holder: Holder
        photo: Photo
    }

    type Object1 {
        targetField: String!
        otherField: String!
    }

    type Parent {
        parentField: Int
        object1: Object1!
        child: Child
        children: [Child!]!
    }

    type Child {
        leaf: String
        other: String
    }

    type Holder {
        parent: Parent
        result: SearchResult
        results: [SearchResult!]
        node: Node
    }

    interface Node {
        id: ID!
    }

    type Photo implements Node {
        id: ID!
        url: String
        width: Int
    }

    type Article implements Node {
        id: ID!
        title: String
    }

    union SearchResult = Photo | Article
"""


def get_fragments(document: DocumentNode) -> dict[str, FragmentDefinitionNode]:
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


def get_root_field_nodes(document: DocumentNode) -> list[FieldNode]:
    operation = next(
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    )
    return [cast(FieldNode, selection) for selection in operation.selection_set.selections]


ComputeFunc = Callable[..., list[str]]


@pytest.fixture
def schema() -> GraphQLSchema:
    return build_schema(SDL)


@pytest.fixture
def compute(schema: GraphQLSchema) -> ComputeFunc:
    """Parse ``query`` and compute the paths of all its root fields against ``typename``."""

    def impl(
        typename: str, query: str, options: Optional[FieldMaskPathsOptions] = None
    ) -> list[str]:
        document = parse(query)
        return compute_field_mask_paths(
            typename,
            get_root_field_nodes(document),
            get_fragments(document),
            schema,
            options,
        )

    return impl
