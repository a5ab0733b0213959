"""
Difficulty presets.

Each preset fixes the starting baseline erosion (ft/decade, negative = loss)
and the starting treasury ($M).
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Difficulty:
    """A difficulty preset."""
    difficulty_id: str
    label: str
    baseline_rate: int  # ft/decade
    starting_budget: int  # $M


EASY = Difficulty(
    difficulty_id="easy",
    label="Easy",
    baseline_rate=-8,
    starting_budget=220,
)

NORMAL = Difficulty(
    difficulty_id="normal",
    label="Normal",
    baseline_rate=-10,
    starting_budget=200,
)

HARD = Difficulty(
    difficulty_id="hard",
    label="Hard",
    baseline_rate=-12,
    starting_budget=180,
)

DIFFICULTIES = MappingProxyType({
    d.difficulty_id: d for d in (EASY, NORMAL, HARD)
})

DEFAULT_DIFFICULTY = NORMAL.difficulty_id


def get_difficulty(difficulty_id: str) -> Difficulty | None:
    """Get a difficulty preset by ID (case-insensitive)."""
    if not isinstance(difficulty_id, str):
        return None
    return DIFFICULTIES.get(difficulty_id.strip().lower())
