"""Main editor screen combining all panels."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Header

from todotui.providers import Snapshot
from todotui.views.widgets import (
    ConfirmDeletePanel,
    InputPanel,
    StatusPanel,
    TodoListPanel,
)


class EditorScreen(Screen):
    """Input line, item list and status bar, with the delete dialog on top."""

    DEFAULT_CSS = """
    EditorScreen {
        layers: base overlay;
    }

    #main {
        layer: base;
        height: 1fr;
    }

    #confirm-layer {
        layer: overlay;
        width: 100%;
        height: 100%;
        align: center middle;
        background: $background 60%;
    }
    """

    def __init__(self, snapshot: Snapshot, **kwargs) -> None:
        super().__init__(**kwargs)
        self._snapshot = snapshot

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield InputPanel(id="input")
            yield TodoListPanel(id="todos")
            yield StatusPanel(id="status")
        with Container(id="confirm-layer"):
            yield ConfirmDeletePanel(id="confirm")

    def on_mount(self) -> None:
        self.render_snapshot(self._snapshot)

    def render_snapshot(self, snapshot: Snapshot) -> None:
        """Redraw every panel from ``snapshot``."""
        self._snapshot = snapshot
        self.query_one(InputPanel).update_from(snapshot)
        self.query_one(TodoListPanel).update_from(snapshot)
        self.query_one(StatusPanel).update_from(snapshot)
        self.query_one(ConfirmDeletePanel).update_from(snapshot)
        self.query_one("#confirm-layer").display = snapshot.show_confirmation

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.app.handle_key(event.key, event.character)
