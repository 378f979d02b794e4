"""Panels for the editor screen. Each one redraws itself from a Snapshot."""

from rich.text import Text
from textual.widgets import Static

from todotui.providers import Snapshot
from todotui.render import (
    confirmation_lines,
    input_line,
    input_title,
    list_lines,
    list_title,
    status_line,
)


class InputPanel(Static):
    """Search term or the text being typed for a new/edited item."""

    DEFAULT_CSS = """
    InputPanel {
        height: 3;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def update_from(self, snapshot: Snapshot) -> None:
        self.border_title = input_title(snapshot)
        self.update(Text(input_line(snapshot)))


class TodoListPanel(Static):
    """The filtered items, with the selected row highlighted."""

    DEFAULT_CSS = """
    TodoListPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
        overflow-y: auto;
    }
    """

    def update_from(self, snapshot: Snapshot) -> None:
        self.border_title = list_title(snapshot)
        body = Text()
        for i, line in enumerate(list_lines(snapshot)):
            if i:
                body.append("\n")
            body.append(line, style="bold blue" if i == snapshot.selection else "")
        self.update(body)


class StatusPanel(Static):
    """Key help for the current mode."""

    DEFAULT_CSS = """
    StatusPanel {
        height: 3;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Status"

    def update_from(self, snapshot: Snapshot) -> None:
        self.update(Text(status_line(snapshot)))


class ConfirmDeletePanel(Static):
    """Dialog asking whether to delete the selected item."""

    DEFAULT_CSS = """
    ConfirmDeletePanel {
        width: 60%;
        height: auto;
        border: solid $error;
        background: $surface;
        padding: 1 2;
        content-align: center middle;
        text-align: center;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Confirm delete"

    def update_from(self, snapshot: Snapshot) -> None:
        self.update(Text("\n".join(confirmation_lines(snapshot)), justify="center"))
