"""
Dice Roller widget.

Features:
- Die face image for the current state
- Text label with the rolled value
- Roll button (posts a RollDice message; the app owns the state and rerolls)
"""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Button, Label, Static

from src.backend.core.i18n import get_i18n
from src.backend.models.die import DieState
from src.backend.services.dice import face_label
from src.frontend.widgets.die_face import DieFace


class DiceRoller(Static):
    """
    A die with a roll button underneath.

    Displays:
    - The die face image
    - The rolled value as text (optional)
    - Roll button
    """

    DEFAULT_CSS = """
    DiceRoller {
        width: auto;
        height: auto;
        padding: 1 2;
        border: solid $accent;
        background: $panel;
    }

    DiceRoller Vertical {
        width: auto;
        height: auto;
        align-horizontal: center;
    }

    .face-label {
        width: 100%;
        text-align: center;
        margin-top: 1;
        color: $text;
    }

    .roll-button {
        margin-top: 1;
        min-width: 15;
        text-style: bold;
    }
    """

    class RollDice(Message):
        """Message when the die should be rolled."""

        pass

    def __init__(
        self,
        state: DieState | None = None,
        lang: str | None = None,
        show_face_label: bool = True,
        **kwargs,
    ) -> None:
        """
        Initialize the dice roller.

        Args:
            state: State to display first; defaults to a fresh DieState
            lang: Language for the button text; None uses the i18n default
            show_face_label: Whether to show the rolled value as text
        """
        super().__init__(**kwargs)
        self._state = state or DieState()
        self._lang = lang
        self._show_face_label = show_face_label

    @property
    def state(self) -> DieState:
        """State currently displayed."""
        return self._state

    def compose(self) -> ComposeResult:
        """Compose the dice roller layout."""
        i18n = get_i18n()
        face = self._state.current_face

        with Vertical():
            yield DieFace(face, id="die-face")

            label = Label(self._caption(face), id="face-label", classes="face-label")
            label.display = self._show_face_label
            yield label

            yield Button(
                i18n.get("common.roll", self._lang),
                id="roll-button",
                classes="roll-button",
                variant="primary",
            )

    def _caption(self, face: int) -> str:
        return get_i18n().get("common.face_label", self._lang, face=face_label(face))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle the roll button."""
        if event.button.id == "roll-button":
            event.stop()
            self.post_message(self.RollDice())

    def show_state(self, state: DieState) -> None:
        """
        Display a new die state.

        Args:
            state: The state to render
        """
        self._state = state
        try:
            self.query_one("#die-face", DieFace).face = state.current_face
            self.query_one("#face-label", Label).update(self._caption(state.current_face))
        except NoMatches:
            # Not composed yet; compose() picks up self._state
            pass
