"""
GraphQL query execution pipeline.

A request moves through parse -> validate -> operation/variables ->
cost analysis -> execute. Each stage either hands over to the next one or
ends the request with one of the outcome types below; the HTTP layer maps
outcomes to status codes.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from inspect import isawaitable
from typing import Any

from graphql import (
    ExecutionContext,
    GraphQLError,
    GraphQLResolveInfo,
    GraphQLSyntaxError,
    execute,
    parse,
    validate,
)

from ..config import settings
from ..data.repository import CharacterRepository
from ..logging import get_logger
from .analysis import (
    ComplexityExceeded,
    DepthExceeded,
    QueryLimits,
    analyze_operation,
    depth_exceeded_message,
)
from .errors import FieldError
from .loaders import Loaders
from .schema import graphql_schema

logger = get_logger(__name__)


@dataclass(frozen=True)
class QuerySyntaxError:
    """The query text could not be parsed."""

    message: str
    line: int
    column: int

    def body(self) -> dict[str, Any]:
        return {
            "syntaxError": self.message,
            "locations": [{"line": self.line, "column": self.column}],
        }


@dataclass(frozen=True)
class QueryRejected:
    """Validation, operation selection, variables or cost limits failed."""

    errors: list[dict[str, Any]]

    def body(self) -> dict[str, Any]:
        return {"errors": self.errors}


@dataclass(frozen=True)
class QueryFailed:
    """A resolver or the repository failed unexpectedly."""

    errors: list[dict[str, Any]]

    def body(self) -> dict[str, Any]:
        return {"errors": self.errors}


@dataclass(frozen=True)
class QueryExecuted:
    """Execution finished; field-level errors may accompany the data."""

    data: dict[str, Any] | None
    errors: list[dict[str, Any]] = field(default_factory=list)

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"data": self.data}
        if self.errors:
            body["errors"] = self.errors
        return body


QueryOutcome = QuerySyntaxError | QueryRejected | QueryFailed | QueryExecuted


class InternalErrorMiddleware:
    """Resolver middleware that records failures which are not field errors.

    The engine still turns every resolver exception into a located error;
    what it records here decides whether the whole request failed.
    """

    def __init__(self) -> None:
        self.failures: list[Exception] = []

    def resolve(
        self, next_: Callable[..., Any], root: Any, info: GraphQLResolveInfo, **kwargs: Any
    ) -> Any:
        try:
            result = next_(root, info, **kwargs)
        except Exception as e:
            self._record(e, info)
            raise
        if isawaitable(result):
            return self._await(result, info)
        return result

    async def _await(self, result: Awaitable[Any], info: GraphQLResolveInfo) -> Any:
        try:
            return await result
        except Exception as e:
            self._record(e, info)
            raise

    def _record(self, error: Exception, info: GraphQLResolveInfo) -> None:
        if isinstance(error, FieldError | GraphQLError):
            return
        logger.error(
            "Resolver failed",
            field=f"{info.parent_type.name}.{info.field_name}",
            path=info.path.as_list(),
            error=str(error),
            error_type=type(error).__name__,
        )
        self.failures.append(error)


def _formatted(errors: list[GraphQLError]) -> list[dict[str, Any]]:
    return [error.formatted for error in errors]


def _syntax_error(error: GraphQLSyntaxError) -> QuerySyntaxError:
    location = error.locations[0] if error.locations else None
    return QuerySyntaxError(
        message=error.message,
        line=location.line if location else 0,
        column=location.column if location else 0,
    )


async def execute_query(
    query: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    *,
    repository: CharacterRepository,
    limits: QueryLimits | None = None,
    context: dict[str, Any] | None = None,
) -> QueryOutcome:
    """Run one GraphQL request against the Star Wars schema.

    Args:
        query: GraphQL document text
        variables: Already decoded variable values
        operation_name: Operation to run when the document defines several
        repository: Character data source; batched through a fresh loader
        limits: Cost ceilings; taken from settings when omitted
        context: Extra entries for the resolvers' context (e.g. the request)

    Returns:
        The outcome of the request. Nothing is raised for bad queries.
    """
    schema = graphql_schema()
    variables = variables or {}
    limits = limits or QueryLimits.from_settings(settings)

    try:
        document = parse(query)
        validation_errors = validate(schema, document)
    except GraphQLSyntaxError as e:
        logger.info("Query syntax error", error=e.message)
        return _syntax_error(e)
    except RecursionError:
        # nesting too deep for the parser or validator to walk
        logger.warning("Query nesting exceeds recursion limit", query_length=len(query))
        return QueryRejected([{"message": depth_exceeded_message(limits.max_depth)}])

    if validation_errors:
        logger.warning("Query failed validation", errors=[e.message for e in validation_errors])
        return QueryRejected(_formatted(validation_errors))

    prepared = ExecutionContext.build(
        schema, document, raw_variable_values=variables, operation_name=operation_name
    )
    if isinstance(prepared, list):
        logger.warning("Query could not be prepared", errors=[e.message for e in prepared])
        return QueryRejected(_formatted(prepared))

    cost = analyze_operation(schema, prepared.operation, prepared.fragments, limits)
    if isinstance(cost, DepthExceeded | ComplexityExceeded):
        logger.warning("Query rejected by cost analysis", reason=cost.message)
        return QueryRejected(_formatted([cost.as_graphql_error()]))

    logger.debug("Executing query", depth=cost.depth, complexity=cost.complexity)

    middleware = InternalErrorMiddleware()
    context_value = {
        **(context or {}),
        "repository": repository,
        "loaders": Loaders(repository),
    }
    result = execute(
        schema,
        document,
        context_value=context_value,
        variable_values=variables,
        operation_name=operation_name,
        middleware=[middleware],
    )
    if isawaitable(result):
        result = await result

    errors = _formatted(result.errors or [])
    if middleware.failures:
        return QueryFailed(errors)

    if errors:
        logger.info("Query executed with field errors", error_count=len(errors))
    return QueryExecuted(data=result.data, errors=errors)
