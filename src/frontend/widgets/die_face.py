"""DieFace widget - renders the image of a single die face."""

from textual.reactive import reactive
from textual.widgets import Static

from src.backend.models.die import INITIAL_FACE
from src.backend.services.dice import face_image, face_label
from src.frontend.resources import load_face_art


class DieFace(Static):
    """Shows the face image for the current value; the tooltip carries the label."""

    DEFAULT_CSS = """
    DieFace {
        width: auto;
        height: auto;
        color: $accent;
        text-style: bold;
    }
    """

    face: int = reactive(INITIAL_FACE)

    def __init__(self, face: int = INITIAL_FACE, **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_reactive(DieFace.face, face)
        self.tooltip = face_label(face)

    @property
    def image_id(self) -> str:
        """Identifier of the image currently shown."""
        return face_image(self.face)

    def render(self) -> str:
        return load_face_art(self.image_id)

    def watch_face(self, face: int) -> None:
        self.tooltip = face_label(face)
