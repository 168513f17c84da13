"""
Textual TUI Application for the dice roller.

Owns the die state, the random source, and the roll flow: the DiceRoller
widget asks for a roll, the app rerolls and pushes the new state back.
"""

import random
from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Center, Middle
from textual.logging import TextualHandler
from textual.reactive import reactive
from textual.widgets import Footer, Header

from src.backend.core.config import Settings, get_settings
from src.backend.core.i18n import get_i18n
from src.backend.models.die import DieState
from src.backend.services.dice import RandomSource, initialize, reroll
from src.backend.services.session_logger import (
    SessionLogger,
    get_session_logger,
    setup_unified_logging,
)
from src.frontend.widgets.dice_roller import DiceRoller


class DiceRollerApp(App):
    """
    Main TUI Application for the dice roller.

    Manages:
    - The current DieState (replaced on every roll, never mutated)
    - The injected random source
    - Key bindings for rolling and quitting
    """

    BINDINGS = [
        ("r", "roll", "Roll"),
        ("q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: $background;
    }

    #main-container {
        height: 1fr;
        width: 100%;
    }
    """

    die_state: DieState = reactive(DieState)

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
        session_logger: Optional[SessionLogger] = None,
    ):
        """
        Initialize the TUI application.

        Args:
            rng: Random source for rolls; seeded from settings when omitted
            settings: Application settings; loaded from config when omitted
            session_logger: Logger for session events
        """
        super().__init__()
        self.settings = settings if settings is not None else get_settings()
        if rng is None:
            rng = random.Random(self.settings.game.dice.seed)
        self.rng: RandomSource = rng
        if session_logger is None:
            session_logger = get_session_logger()
        self.session_logger = session_logger
        self.roll_count = 0
        self.ui_language = self.settings.game.default_language
        self.title = get_i18n().get("common.app_title", self.ui_language)
        self.set_reactive(DiceRollerApp.die_state, initialize())

    def compose(self) -> ComposeResult:
        """Compose the UI layout."""
        yield Header()
        with Middle(id="main-container"):
            with Center():
                yield DiceRoller(
                    self.die_state,
                    lang=self.ui_language,
                    show_face_label=self.settings.frontend.show_face_label,
                    id="dice-roller",
                )
        yield Footer()

    def on_mount(self) -> None:
        """Called when the app starts."""
        self.session_logger.log_session_start(
            self.die_state.current_face, seed=self.settings.game.dice.seed
        )

    def on_unmount(self) -> None:
        """Called when the app closes."""
        self.session_logger.log_session_end(self.roll_count)

    def roll(self) -> DieState:
        """
        Reroll the die and make the result the current state.

        Returns:
            The new state
        """
        old_state = self.die_state
        new_state = reroll(old_state, self.rng)
        self.roll_count += 1
        self.session_logger.log_state_change(
            "current_face", old_state.current_face, new_state.current_face, reason="roll"
        )
        self.die_state = new_state
        return new_state

    def watch_die_state(self, state: DieState) -> None:
        """Push the state to the dice roller widget."""
        if not self.is_running:
            return
        for roller in self.query(DiceRoller):
            roller.show_state(state)

    def action_roll(self) -> None:
        """Roll from the key binding."""
        self.roll()

    def on_dice_roller_roll_dice(self, message: DiceRoller.RollDice) -> None:
        """Roll when the widget's button is pressed."""
        self.roll()


def main() -> None:
    """Entry point for the TUI application."""
    settings = get_settings()
    setup_unified_logging(
        level=settings.logging.level,
        log_file=settings.logging.file,
        console_handler=TextualHandler(),
    )
    app = DiceRollerApp(settings=settings)
    app.run()


if __name__ == "__main__":
    main()
