"""
Frontend UI widgets for the dice roller.
"""

from .dice_roller import DiceRoller
from .die_face import DieFace

__all__ = [
    "DiceRoller",
    "DieFace",
]
