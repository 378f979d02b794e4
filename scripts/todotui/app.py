"""
Todo TUI Application.

Textual front end: turns key events into commands, feeds them to the
ModeController and redraws the editor screen from a fresh snapshot.
"""

from __future__ import annotations

import logging

from textual.app import App

from todotui.keymap import decode_key
from todotui.modes import ModeController
from todotui.state import AppState
from todotui.views.editor import EditorScreen

logger = logging.getLogger(__name__)


class TodoApp(App):
    """Main list editor application."""

    TITLE = "Todos"
    SUB_TITLE = "List editor"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, controller: ModeController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller

    @property
    def controller(self) -> ModeController:
        return self._controller

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(EditorScreen(self._controller.snapshot()))

    def handle_key(self, key: str, character: str | None) -> None:
        """Decode one key press against the current mode and apply it."""
        command = decode_key(self._controller.mode, key, character)
        if command is None:
            return
        if not self._controller.handle(command):
            self.exit()
            return
        self.show_snapshot()

    def show_snapshot(self) -> None:
        """Redraw the editor from the controller's current state."""
        if isinstance(self.screen, EditorScreen):
            self.screen.render_snapshot(self._controller.snapshot())


def run(state: AppState) -> None:
    """Run the TUI application."""
    app = TodoApp(ModeController(state))
    app.run()
    logger.debug("session ended with %d items", len(state.items))
