"""
Dice Roller TUI Frontend.

Textual-based terminal user interface over the die state core.
"""

from .app import DiceRollerApp

__all__ = [
    "DiceRollerApp",
]
