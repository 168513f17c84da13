"""
Die state model.

A six-sided die has exactly one piece of state: the face currently showing.
DieState is immutable; an update (reroll) produces a new instance.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

FACE_MIN = 1
FACE_MAX = 6
FACES = tuple(range(FACE_MIN, FACE_MAX + 1))
INITIAL_FACE = 1


class InvalidFaceError(ValueError):
    """Raised when a face value falls outside 1..6."""

    def __init__(self, face: object):
        self.face = face
        super().__init__(f"Invalid face value: {face!r} (expected {FACE_MIN}-{FACE_MAX})")


def validate_face(face: object) -> int:
    """
    Check that a value is a valid face.

    Args:
        face: Candidate face value

    Returns:
        The face as an int

    Raises:
        InvalidFaceError: If the value is not an int in 1..6
    """
    # bool is an int subclass but never a face
    if isinstance(face, bool) or not isinstance(face, int):
        raise InvalidFaceError(face)
    if face < FACE_MIN or face > FACE_MAX:
        raise InvalidFaceError(face)
    return face


class DieState(BaseModel):
    """
    Current state of the die.

    Attributes:
        current_face: The face showing, always in 1..6.

    Examples:
        >>> state = DieState()
        >>> state.current_face
        1
        >>> DieState(current_face=4).current_face
        4
    """

    model_config = ConfigDict(frozen=True)

    current_face: int = Field(
        default=INITIAL_FACE,
        ge=FACE_MIN,
        le=FACE_MAX,
        description="Face currently showing",
    )

    @field_validator("current_face", mode="before")
    @classmethod
    def check_face(cls, v: object) -> int:
        return validate_face(v)

    def __str__(self) -> str:
        return str(self.current_face)
