"""
Die rolling for the dice roller.

The core exposes two state operations to the presentation layer:
- initialize(): the starting state (face 1)
- reroll(state, rng): a new state with a uniformly random face

Plus the pure lookups the presentation layer renders with:
- face_image(face): opaque image identifier for a face
- face_label(face): accessibility label for a face

The random source is injected so rolls can be made deterministic in tests.
Anything with a ``randint(a, b)`` method works; ``random.Random`` is the
usual choice.
"""

import logging
import random
from types import MappingProxyType
from typing import Protocol

from src.backend.models.die import (
    FACE_MAX,
    FACE_MIN,
    FACES,
    INITIAL_FACE,
    DieState,
    InvalidFaceError,
    validate_face,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Minimal interface of an injectable random source."""

    def randint(self, a: int, b: int) -> int: ...


_default_rng = random.Random()

FACE_IMAGES = MappingProxyType({face: f"dice_{face}" for face in FACES})


def initialize() -> DieState:
    """Return the state a new session starts with."""
    return DieState(current_face=INITIAL_FACE)


def reroll(state: DieState, rng: RandomSource | None = None) -> DieState:
    """
    Roll the die.

    The new face is drawn uniformly from 1..6 and is independent of the
    current face, so it may be the same value again.

    Args:
        state: Current die state (left untouched)
        rng: Random source; the module default is used when omitted

    Returns:
        A new DieState

    Raises:
        InvalidFaceError: If the random source returns a value outside 1..6
    """
    source = rng if rng is not None else _default_rng
    face = validate_face(source.randint(FACE_MIN, FACE_MAX))
    logger.debug("Die rerolled: %d -> %d", state.current_face, face)
    return DieState(current_face=face)


def face_image(face: int) -> str:
    """
    Map a face value to its image identifier.

    Examples:
        >>> face_image(4)
        'dice_4'
    """
    return FACE_IMAGES[validate_face(face)]


def face_label(face: int) -> str:
    """Accessibility label for the image of a face."""
    return str(validate_face(face))


__all__ = [
    "FACE_IMAGES",
    "InvalidFaceError",
    "RandomSource",
    "face_image",
    "face_label",
    "initialize",
    "reroll",
]
