"""Pydantic records for the characters dataset."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Episode(Enum):
    """One of the films in the Star Wars Trilogy."""

    NEWHOPE = 4
    EMPIRE = 5
    JEDI = 6


class HumanRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["human"] = "human"
    id: str
    name: str | None = None
    friends: tuple[str, ...] = ()
    appears_in: tuple[Episode, ...] = ()
    home_planet: str | None = None


class DroidRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["droid"] = "droid"
    id: str
    name: str | None = None
    friends: tuple[str, ...] = ()
    appears_in: tuple[Episode, ...] = ()
    primary_function: str | None = None


# Closed set of character variants, tagged by ``kind``
CharacterRecord = Annotated[HumanRecord | DroidRecord, Field(discriminator="kind")]

_character_adapter: TypeAdapter[HumanRecord | DroidRecord] = TypeAdapter(CharacterRecord)


def parse_character(payload: dict[str, Any]) -> HumanRecord | DroidRecord:
    """Validate a raw mapping into the matching character record."""
    return _character_adapter.validate_python(payload)
