"""
Error types raised or returned while executing GraphQL queries
"""

from __future__ import annotations


class StarWarsError(Exception):
    """Base class for errors raised by the GraphQL layer."""


class FieldError(StarWarsError):
    """Failure local to a single field; siblings keep resolving."""


class CharacterNotFoundError(FieldError):
    """A referenced character id does not exist in the dataset."""

    def __init__(self, character_id: str):
        self.character_id = character_id
        super().__init__(f"Character with id '{character_id}' not found.")


class InvalidVariablesError(StarWarsError, ValueError):
    """The request's variables are not a JSON object."""
