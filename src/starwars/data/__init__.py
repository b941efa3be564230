"""In-memory character data."""

from .models import CharacterRecord, DroidRecord, Episode, HumanRecord, parse_character
from .repository import CharacterRepository

__all__ = [
    "CharacterRecord",
    "CharacterRepository",
    "DroidRecord",
    "Episode",
    "HumanRecord",
    "parse_character",
]
