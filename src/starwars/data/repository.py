"""
Read-only character repository.

The index is built once and never mutated, so concurrent lookups need no
locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from types import MappingProxyType
from typing import Any

from ..logging import get_logger
from .models import DroidRecord, Episode, HumanRecord, parse_character
from .seed_data import DEFAULT_HERO_ID, EPISODE_HEROES, seed_payloads

logger = get_logger(__name__)


class CharacterRepository:
    """In-memory store of humans and droids keyed by id."""

    def __init__(self, records: Iterable[HumanRecord | DroidRecord | dict[str, Any]] | None = None):
        if records is None:
            records = seed_payloads()

        index: dict[str, HumanRecord | DroidRecord] = {}
        for item in records:
            record = item if isinstance(item, HumanRecord | DroidRecord) else parse_character(item)
            if record.id in index:
                raise ValueError(f"Duplicate character id: {record.id}")
            index[record.id] = record

        self._characters: Mapping[str, HumanRecord | DroidRecord] = MappingProxyType(index)

    async def get_by_ids(self, ids: Set[str]) -> dict[str, HumanRecord | DroidRecord]:
        """Batch lookup. Ids that are not in the dataset are simply absent."""
        found = {id_: self._characters[id_] for id_ in ids if id_ in self._characters}
        logger.debug("Characters fetched", requested=len(ids), found=len(found))
        return found

    def hero_id(self, episode: Episode | None = None) -> str:
        """Id of the protagonist of an episode, or of the whole saga."""
        if episode is None:
            return DEFAULT_HERO_ID
        return EPISODE_HEROES.get(episode, DEFAULT_HERO_ID)

    def all_ids(self) -> list[str]:
        return sorted(self._characters)

    def __len__(self) -> int:
        return len(self._characters)
