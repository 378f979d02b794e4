"""
Render snapshots and collaborator contracts.

Protocols define the interface to the terminal side; implementations can be
swapped for testing (scripted commands, recording sinks) or for the Textual
front end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:
    from todotui.modes import Command


class Mode(Enum):
    """Interpretation context for incoming key commands."""

    NORMAL = "normal"
    SEARCHING = "searching"
    ADDING = "adding"
    EDITING = "editing"
    CONFIRMING_DELETE = "confirming_delete"


INITIAL_MODE = Mode.NORMAL


@dataclass(frozen=True)
class ItemInfo:
    """Immutable snapshot of one list item."""

    id: int
    text: str


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs to draw one frame."""

    mode: Mode
    filter_text: str
    scratch_buffer: str
    filtered_view: tuple[ItemInfo, ...]
    selection: int | None
    total_count: int = 0

    @property
    def show_confirmation(self) -> bool:
        return self.mode is Mode.CONFIRMING_DELETE

    @property
    def selected_item(self) -> ItemInfo | None:
        if self.selection is None or self.selection >= len(self.filtered_view):
            return None
        return self.filtered_view[self.selection]


class KeySource(Protocol):
    """Protocol for the lazily produced stream of key commands."""

    def __iter__(self) -> Iterator[Command]:
        """Yield one command per key press."""
        ...


class RenderSink(Protocol):
    """Protocol for whatever draws a frame."""

    def render(self, snapshot: Snapshot) -> None:
        """Draw the given snapshot."""
        ...
