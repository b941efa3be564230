"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator, Set
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from starwars.data.repository import CharacterRepository


class SpyCharacterRepository(CharacterRepository):
    """Repository that records every batch it is asked for."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.calls: list[frozenset[str]] = []

    async def get_by_ids(self, ids: Set[str]):
        self.calls.append(frozenset(ids))
        return await super().get_by_ids(ids)

    @property
    def fetched_ids(self) -> list[str]:
        return [id_ for call in self.calls for id_ in call]


class FailingCharacterRepository(CharacterRepository):
    """Repository whose lookups always blow up."""

    async def get_by_ids(self, ids: Set[str]):
        raise RuntimeError("character store unavailable")


@pytest.fixture
def repository() -> SpyCharacterRepository:
    return SpyCharacterRepository()


@pytest.fixture
def make_repository() -> type[SpyCharacterRepository]:
    """Build a spy repository over custom records."""
    return SpyCharacterRepository


@pytest.fixture
def failing_repository() -> FailingCharacterRepository:
    return FailingCharacterRepository()


@pytest.fixture
def app(repository: SpyCharacterRepository) -> FastAPI:
    from starwars.api.app import create_app

    return create_app(repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
