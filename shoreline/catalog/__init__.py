"""
Catalog - Static tables that parametrize the simulation.

Three read-only tables, each keyed by a stable identifier:
- Difficulty presets (baseline erosion, starting budget)
- Management actions (title, cost, effect description)
- Wildcard events (name, narrative text)

Changing these tables reparametrizes the simulation without
touching resolver logic.
"""

from .difficulty import Difficulty, DIFFICULTIES, DEFAULT_DIFFICULTY, get_difficulty
from .actions import ActionDefinition, ACTIONS, ACTION_ORDER, get_action
from .wildcards import Wildcard, WILDCARDS, get_wildcard

__all__ = [
    "Difficulty",
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "get_difficulty",
    "ActionDefinition",
    "ACTIONS",
    "ACTION_ORDER",
    "get_action",
    "Wildcard",
    "WILDCARDS",
    "get_wildcard",
]
