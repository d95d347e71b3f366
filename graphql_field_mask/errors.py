from typing import Optional

from graphql import GraphQLError, Node, TypeKind


class FieldMaskError(GraphQLError):
    pass


class UnknownTypeError(FieldMaskError):
    type_name: str

    def __init__(self, type_name: str, node: Optional[Node] = None):
        super().__init__(f'{type_name} type is not found', node)
        self.type_name = type_name


class NotAnObjectTypeError(FieldMaskError):
    type_name: str
    type_kind: TypeKind

    def __init__(self, type_name: str, type_kind: TypeKind, node: Optional[Node] = None):
        super().__init__(f'{type_name} is {type_kind.name}, but want OBJECT', node)
        self.type_name = type_name
        self.type_kind = type_kind


class UnknownFieldError(FieldMaskError):
    # Raised as well when the root typename does not match the type the query
    # was written against.
    type_name: str
    field_name: str

    def __init__(self, type_name: str, field_name: str, node: Optional[Node] = None):
        super().__init__(f'{type_name}.{field_name} is not found', node)
        self.type_name = type_name
        self.field_name = field_name


class UnknownFragmentError(FieldMaskError):
    fragment_name: str

    def __init__(self, fragment_name: str, node: Optional[Node] = None):
        super().__init__(f'Fragment {fragment_name} is not found', node)
        self.fragment_name = fragment_name


class FragmentCycleError(FieldMaskError):
    fragment_name: str

    def __init__(self, fragment_name: str, node: Optional[Node] = None):
        super().__init__(f'Fragment {fragment_name} spreads itself', node)
        self.fragment_name = fragment_name
