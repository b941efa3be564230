"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.character import Character, Droid, Episode, Human


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(
        description=(
            "If omitted, returns the hero of the whole saga. "
            "If provided, returns the hero of that particular episode."
        )
    )
    async def hero(self, info: strawberry.Info, episode: Episode | None = None) -> Character:
        from ..resolvers.character import resolve_hero

        return await resolve_hero(info, episode)

    @strawberry.field
    async def human(
        self,
        info: strawberry.Info,
        id: Annotated[str, strawberry.argument(description="id of the character")],
    ) -> Human | None:
        """Get a human by ID."""
        from ..resolvers.character import resolve_human

        return await resolve_human(info, id)

    @strawberry.field
    async def droid(
        self,
        info: strawberry.Info,
        id: Annotated[str, strawberry.argument(description="id of the character")],
    ) -> Droid | None:
        """Get a droid by ID."""
        from ..resolvers.character import resolve_droid

        return await resolve_droid(info, id)
