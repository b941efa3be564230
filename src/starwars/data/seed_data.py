"""Fixed characters dataset, validated into records by ``parse_character``."""

from __future__ import annotations

from typing import Any

from .models import Episode

ALL_EPISODES = [Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI]

HUMANS: list[dict[str, Any]] = [
    {
        "id": "1000",
        "name": "Luke Skywalker",
        "friends": ["1002", "1003", "2000", "2001"],
        "appears_in": ALL_EPISODES,
        "home_planet": "Tatooine",
    },
    {
        "id": "1001",
        "name": "Darth Vader",
        "friends": ["1004"],
        "appears_in": ALL_EPISODES,
        "home_planet": "Tatooine",
    },
    {
        "id": "1002",
        "name": "Han Solo",
        "friends": ["1000", "1003", "2001"],
        "appears_in": ALL_EPISODES,
        "home_planet": None,
    },
    {
        "id": "1003",
        "name": "Leia Organa",
        "friends": ["1000", "1002", "2000", "2001"],
        "appears_in": ALL_EPISODES,
        "home_planet": "Alderaan",
    },
    {
        "id": "1004",
        "name": "Wilhuff Tarkin",
        "friends": ["1001"],
        "appears_in": [Episode.NEWHOPE],
        "home_planet": None,
    },
]

DROIDS: list[dict[str, Any]] = [
    {
        "id": "2000",
        "name": "C-3PO",
        "friends": ["1000", "1002", "1003", "2001"],
        "appears_in": ALL_EPISODES,
        "primary_function": "Protocol",
    },
    {
        "id": "2001",
        "name": "R2-D2",
        "friends": ["1000", "1002", "1003"],
        "appears_in": ALL_EPISODES,
        "primary_function": "Astromech",
    },
]

# Hero of the whole saga, and per-episode overrides
DEFAULT_HERO_ID = "2001"
EPISODE_HEROES = {Episode.EMPIRE: "1000"}


def seed_payloads() -> list[dict[str, Any]]:
    """Return every character payload tagged with its kind."""
    return [{"kind": "human", **human} for human in HUMANS] + [
        {"kind": "droid", **droid} for droid in DROIDS
    ]
