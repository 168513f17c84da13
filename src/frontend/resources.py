"""
Static die face images, keyed by the image identifiers the core hands out.

Each image is a bordered box with pips placed on a 3x3 grid.
"""

from types import MappingProxyType

from src.backend.services.dice import FACE_IMAGES

PIP = "●"

# (row, column) positions of the pips on each face
PIP_LAYOUTS = {
    1: {(1, 1)},
    2: {(0, 0), (2, 2)},
    3: {(0, 0), (1, 1), (2, 2)},
    4: {(0, 0), (0, 2), (2, 0), (2, 2)},
    5: {(0, 0), (0, 2), (1, 1), (2, 0), (2, 2)},
    6: {(0, 0), (1, 0), (2, 0), (0, 2), (1, 2), (2, 2)},
}


def _draw_face(pips: set[tuple[int, int]]) -> str:
    lines = ["┌" + "─" * 11 + "┐"]
    for row in range(3):
        cells = [PIP if (row, col) in pips else " " for col in range(3)]
        lines.append("│ " + "   ".join(cells) + " │")
    lines.append("└" + "─" * 11 + "┘")
    return "\n".join(lines)


DIE_FACE_ART = MappingProxyType(
    {FACE_IMAGES[face]: _draw_face(pips) for face, pips in PIP_LAYOUTS.items()}
)


def load_face_art(image_id: str) -> str:
    """
    Get the image for an identifier.

    Raises:
        KeyError: If no image is registered under the identifier
    """
    try:
        return DIE_FACE_ART[image_id]
    except KeyError:
        raise KeyError(f"Unknown die face image: {image_id}") from None
