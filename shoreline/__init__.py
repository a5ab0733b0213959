"""
Shoreline - Coastal Management Simulation Engine

A deterministic, turn-based engine for a beach-erosion management game.
One policy action per decade against a shrinking beach and a finite budget.
The engine provides:
- Static catalogs (difficulties, actions, wildcard events)
- Immutable simulation state
- Layered rate / decade / event resolution
- Turn controller with bounded undo
"""

__version__ = "0.1.0"
