"""GraphQL query and schema endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from ...data.repository import CharacterRepository
from ...graphql.executor import (
    QueryExecuted,
    QueryFailed,
    QueryOutcome,
    QueryRejected,
    QuerySyntaxError,
    execute_query,
)
from ...graphql.schema import render_schema
from ...graphql.variables import parse_variables
from ...logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: Any = None
    operation_name: str | None = Field(default=None, alias="operationName")


def get_character_repository(request: Request) -> CharacterRepository:
    """The application's shared, read-only character repository."""
    return request.app.state.character_repository


def outcome_status(outcome: QueryOutcome) -> int:
    if isinstance(outcome, QuerySyntaxError | QueryRejected):
        return 400
    if isinstance(outcome, QueryFailed):
        return 500
    return 200


def outcome_response(outcome: QueryOutcome) -> JSONResponse:
    return JSONResponse(status_code=outcome_status(outcome), content=outcome.body())


async def run_query(
    request: Request,
    repository: CharacterRepository,
    query: str,
    variables: Any,
    operation_name: str | None,
) -> JSONResponse:
    outcome = await execute_query(
        query,
        parse_variables(variables),
        operation_name,
        repository=repository,
        context={"request": request},
    )
    if not isinstance(outcome, QueryExecuted):
        logger.info("GraphQL request not executed", outcome=type(outcome).__name__)
    return outcome_response(outcome)


@router.get("/gql")
async def gql(
    request: Request,
    query: str,
    variables: str | None = None,
    operation_name: str | None = Query(default=None, alias="operationName"),
    operation: str | None = None,
    repository: CharacterRepository = Depends(get_character_repository),
) -> JSONResponse:
    """Execute a query passed in the query string."""
    return await run_query(request, repository, query, variables, operation_name or operation)


@router.post("/gql")
async def gql_request(
    request: Request,
    body: GraphQLRequest,
    repository: CharacterRepository = Depends(get_character_repository),
) -> JSONResponse:
    """Execute a query passed as a JSON body."""
    return await run_query(request, repository, body.query, body.variables, body.operation_name)


@router.get("/schema", response_class=PlainTextResponse)
async def schema() -> str:
    """Render the schema in SDL."""
    return render_schema()
