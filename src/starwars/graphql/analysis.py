"""
Static cost analysis of a GraphQL operation.

Depth and complexity are computed from the query shape alone, before any
resolver runs. Both checks return a value describing the outcome; a
rejected query is a result, not an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLError,
    GraphQLField,
    GraphQLNamedType,
    GraphQLSchema,
    InlineFragmentNode,
    OperationDefinitionNode,
    SchemaMetaFieldDef,
    SelectionSetNode,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    get_named_type,
    get_nullable_type,
    is_list_type,
)

DEFAULT_MAX_DEPTH = 15
DEFAULT_MAX_COMPLEXITY = 4000

TOO_COMPLEX_MESSAGE = "Query is too expensive."

# Most friends any character in the dataset has
DEFAULT_LIST_MULTIPLIERS: Mapping[str, float] = MappingProxyType({"Character.friends": 4})


def depth_exceeded_message(max_depth: int) -> str:
    return f"Max query depth {max_depth} is reached."


@dataclass(frozen=True)
class QueryLimits:
    """Cost ceilings and list-field multipliers applied before execution."""

    max_depth: int = DEFAULT_MAX_DEPTH
    max_complexity: float = DEFAULT_MAX_COMPLEXITY
    # "Type.field" -> estimated number of items returned by that list field
    list_multipliers: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_LIST_MULTIPLIERS)
    )

    @classmethod
    def from_settings(cls, settings: Any) -> QueryLimits:
        return cls(
            max_depth=settings.max_query_depth,
            max_complexity=settings.max_query_complexity,
            list_multipliers=dict(settings.complexity_multipliers),
        )


@dataclass(frozen=True)
class QueryCost:
    depth: int
    complexity: float


@dataclass(frozen=True)
class DepthExceeded:
    max_depth: int
    path: tuple[str, ...]
    node: FieldNode

    @property
    def message(self) -> str:
        return depth_exceeded_message(self.max_depth)

    def as_graphql_error(self) -> GraphQLError:
        return GraphQLError(self.message, nodes=[self.node], path=list(self.path))


@dataclass(frozen=True)
class ComplexityExceeded:
    max_complexity: float
    complexity: float

    @property
    def message(self) -> str:
        return TOO_COMPLEX_MESSAGE

    def as_graphql_error(self) -> GraphQLError:
        return GraphQLError(
            self.message,
            extensions={"complexity": self.complexity, "maxComplexity": self.max_complexity},
        )


AnalysisResult = QueryCost | DepthExceeded | ComplexityExceeded


def _field_definition(
    schema: GraphQLSchema, parent_type: GraphQLNamedType, field_name: str
) -> GraphQLField | None:
    if field_name == "__typename":
        return TypeNameMetaFieldDef
    if parent_type is schema.query_type:
        if field_name == "__schema":
            return SchemaMetaFieldDef
        if field_name == "__type":
            return TypeMetaFieldDef
    fields = getattr(parent_type, "fields", None)
    return fields.get(field_name) if fields else None


class _OperationWalker:
    """Walks one operation's selections with fragments expanded in place."""

    def __init__(
        self,
        schema: GraphQLSchema,
        fragments: Mapping[str, FragmentDefinitionNode],
        limits: QueryLimits,
    ):
        self.schema = schema
        self.fragments = fragments
        self.limits = limits

    def _fields(
        self, selection_set: SelectionSetNode | None, parent_type: GraphQLNamedType | None
    ):
        """Yield (field node, parent type) pairs, expanding fragments."""
        if selection_set is None:
            return
        for selection in selection_set.selections:
            if isinstance(selection, FieldNode):
                yield selection, parent_type
            elif isinstance(selection, InlineFragmentNode):
                condition = selection.type_condition
                fragment_type = (
                    self.schema.get_type(condition.name.value) if condition else parent_type
                )
                yield from self._fields(selection.selection_set, fragment_type)
            elif isinstance(selection, FragmentSpreadNode):
                fragment = self.fragments.get(selection.name.value)
                if fragment is None:
                    continue
                fragment_type = self.schema.get_type(fragment.type_condition.name.value)
                yield from self._fields(fragment.selection_set, fragment_type)

    def _child_type(
        self, parent_type: GraphQLNamedType | None, node: FieldNode
    ) -> tuple[GraphQLField | None, GraphQLNamedType | None]:
        if parent_type is None:
            return None, None
        definition = _field_definition(self.schema, parent_type, node.name.value)
        if definition is None:
            return None, None
        return definition, get_named_type(definition.type)

    def first_too_deep(
        self,
        selection_set: SelectionSetNode | None,
        parent_type: GraphQLNamedType | None,
        depth: int = 1,
        path: tuple[str, ...] = (),
    ) -> tuple[int, DepthExceeded | None]:
        """Return the deepest level seen and the first field past the limit."""
        deepest = depth - 1
        for node, owner in self._fields(selection_set, parent_type):
            field_path = path + ((node.alias or node.name).value,)
            if depth > self.limits.max_depth:
                return depth, DepthExceeded(self.limits.max_depth, field_path, node)
            _, child_type = self._child_type(owner, node)
            child_depth, exceeded = self.first_too_deep(
                node.selection_set, child_type, depth + 1, field_path
            )
            if exceeded is not None:
                return child_depth, exceeded
            deepest = max(deepest, child_depth)
        return deepest, None

    def multiplier(self, owner: GraphQLNamedType, definition: GraphQLField, name: str) -> float:
        if not is_list_type(get_nullable_type(definition.type)):
            return 1
        weights = self.limits.list_multipliers
        for type_name in (owner.name, *(i.name for i in getattr(owner, "interfaces", ()))):
            key = f"{type_name}.{name}"
            if key in weights:
                return weights[key]
        return 1

    def complexity(
        self,
        selection_set: SelectionSetNode | None,
        parent_type: GraphQLNamedType | None,
        factor: float = 1,
        running: float = 0,
    ) -> float:
        """Sum of 1 per field scaled by ancestor list multipliers.

        Stops descending once the running total is over the ceiling.
        """
        total = 0.0
        for node, owner in self._fields(selection_set, parent_type):
            total += factor
            if running + total > self.limits.max_complexity:
                return total
            definition, child_type = self._child_type(owner, node)
            child_factor = factor
            if definition is not None and owner is not None:
                child_factor = factor * self.multiplier(owner, definition, node.name.value)
            total += self.complexity(node.selection_set, child_type, child_factor, running + total)
        return total


def analyze_operation(
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
    fragments: Mapping[str, FragmentDefinitionNode],
    limits: QueryLimits | None = None,
) -> AnalysisResult:
    """Check an operation against the depth and complexity ceilings."""
    limits = limits or QueryLimits()
    walker = _OperationWalker(schema, fragments, limits)
    root_type = schema.get_root_type(operation.operation)

    depth, exceeded = walker.first_too_deep(operation.selection_set, root_type)
    if exceeded is not None:
        return exceeded

    complexity = walker.complexity(operation.selection_set, root_type)
    if complexity > limits.max_complexity:
        return ComplexityExceeded(limits.max_complexity, complexity)

    return QueryCost(depth=depth, complexity=complexity)
