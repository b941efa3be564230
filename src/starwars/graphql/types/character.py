"""
Character GraphQL type definitions
"""

from typing import Optional

import strawberry

from ...data import models
from ...data.models import DroidRecord, HumanRecord

Episode = strawberry.enum(models.Episode, description="One of the films in the Star Wars Trilogy")


@strawberry.interface(description="A character in the Star Wars Trilogy")
class Character:
    """Fields shared by every character variant."""

    id: str = strawberry.field(description="The id of the character.")
    name: str | None = strawberry.field(description="The name of the character.")
    appears_in: list[Episode | None] | None = strawberry.field(
        description="Which movies they appear in."
    )
    friend_ids: strawberry.Private[tuple[str, ...]]

    @strawberry.field(
        description="The friends of the character, or an empty list if they have none."
    )
    async def friends(self, info: strawberry.Info) -> list[Optional["Character"]]:
        from ..resolvers.character import resolve_friends

        return await resolve_friends(self, info)


@strawberry.type(description="A humanoid creature in the Star Wars universe.")
class Human(Character):
    home_planet: str | None = strawberry.field(
        description="The home planet of the human, or null if unknown."
    )

    @classmethod
    def from_record(cls, record: HumanRecord) -> "Human":
        return cls(
            id=record.id,
            name=record.name,
            appears_in=list(record.appears_in),
            friend_ids=record.friends,
            home_planet=record.home_planet,
        )


@strawberry.type(description="A mechanical creature in the Star Wars universe.")
class Droid(Character):
    primary_function: str | None = strawberry.field(
        description="The primary function of the droid."
    )

    @classmethod
    def from_record(cls, record: DroidRecord) -> "Droid":
        return cls(
            id=record.id,
            name=record.name,
            appears_in=list(record.appears_in),
            friend_ids=record.friends,
            primary_function=record.primary_function,
        )


def character_from_record(record: HumanRecord | DroidRecord) -> Human | Droid:
    """Build the GraphQL object for whichever variant the record is."""
    if isinstance(record, HumanRecord):
        return Human.from_record(record)
    return Droid.from_record(record)
