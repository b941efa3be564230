from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...data.models import DroidRecord, Episode, HumanRecord
from ...data.repository import CharacterRepository
from ...logging import get_logger
from ..errors import CharacterNotFoundError
from ..loaders import Loaders
from ..types.character import character_from_record

if TYPE_CHECKING:
    from ..types.character import Character, Droid, Human

logger = get_logger(__name__)


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]


def get_repository(info: strawberry.Info) -> CharacterRepository:
    return info.context["repository"]


async def resolve_hero(info: strawberry.Info, episode: Episode | None) -> Character | None:
    hero_id = get_repository(info).hero_id(episode)
    record = await get_loaders(info).character_loader.load(hero_id)
    if record is None:
        # hero is non-null, so this surfaces as a field error on `hero`
        logger.warning("Hero missing from dataset", hero_id=hero_id)
        return None
    return character_from_record(record)


async def resolve_human(info: strawberry.Info, id: str) -> Human | None:
    record = await get_loaders(info).character_loader.load(id)
    if not isinstance(record, HumanRecord):
        return None
    return character_from_record(record)


async def resolve_droid(info: strawberry.Info, id: str) -> Droid | None:
    record = await get_loaders(info).character_loader.load(id)
    if not isinstance(record, DroidRecord):
        return None
    return character_from_record(record)


async def resolve_friends(character: Character, info: strawberry.Info) -> list[Any]:
    """Resolve friend ids in one batch, preserving their declared order.

    A dangling id yields a ``CharacterNotFoundError`` in its slot: the engine
    reports it at that list index and nulls only that item.
    """
    if not character.friend_ids:
        return []

    records = await get_loaders(info).character_loader.load_many(list(character.friend_ids))
    return [
        character_from_record(record) if record is not None else CharacterNotFoundError(friend_id)
        for friend_id, record in zip(character.friend_ids, records)
    ]
