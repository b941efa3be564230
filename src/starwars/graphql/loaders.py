from collections.abc import Callable, Coroutine
from typing import Any

from strawberry.dataloader import DataLoader

from ..data.models import DroidRecord, HumanRecord
from ..data.repository import CharacterRepository

CharacterLoadFn = Callable[[list[str]], Coroutine[Any, Any, list[HumanRecord | DroidRecord | None]]]


def make_character_batch_fn(repository: CharacterRepository) -> CharacterLoadFn:
    async def load_characters(keys: list[str]) -> list[HumanRecord | DroidRecord | None]:
        """Batch load characters by ID, one repository call per batch."""
        found = await repository.get_by_ids(set(keys))
        return [found.get(key) for key in keys]

    return load_characters


class Loaders:
    """Per-request data loaders. Never share an instance between requests."""

    def __init__(self, repository: CharacterRepository):
        self.character_loader = DataLoader(load_fn=make_character_batch_fn(repository))
