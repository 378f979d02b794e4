"""
Plain-text rendering of a Snapshot.

The Textual front end uses the line helpers for its panel contents; the
frame functions draw the same screen with box characters for headless use
(``todo.py --once`` / ``--keys``).
"""

from __future__ import annotations

import sys
from typing import TextIO

from todotui.keymap import HELP_TEXT
from todotui.providers import Mode, Snapshot

# Box drawing characters
BOX_H = "─"
BOX_V = "│"
BOX_TL = "┌"
BOX_TR = "┐"
BOX_BL = "└"
BOX_BR = "┘"

SELECTED_SYMBOL = "-> "
UNSELECTED_SYMBOL = "- "

DEFAULT_WIDTH = 72


def input_title(snapshot: Snapshot) -> str:
    if snapshot.mode is Mode.ADDING:
        return "Add todo"
    if snapshot.mode is Mode.EDITING:
        return "Edit todo"
    return "Search"


def input_line(snapshot: Snapshot) -> str:
    if snapshot.mode is Mode.SEARCHING:
        return f"Search: {snapshot.filter_text}"
    if snapshot.mode is Mode.ADDING:
        return f"New todo: {snapshot.scratch_buffer}"
    if snapshot.mode is Mode.EDITING:
        return f"Edit todo: {snapshot.scratch_buffer}"
    return f"Press '/' to search (Filter: {snapshot.filter_text})"


def list_title(snapshot: Snapshot) -> str:
    return f"Todos ({len(snapshot.filtered_view)} shown)"


def list_lines(snapshot: Snapshot) -> list[str]:
    """One row per visible item, the selected one marked with an arrow."""
    lines = []
    for i, item in enumerate(snapshot.filtered_view):
        symbol = SELECTED_SYMBOL if i == snapshot.selection else UNSELECTED_SYMBOL
        lines.append(f"{symbol}{item.text}")
    return lines


def status_line(snapshot: Snapshot) -> str:
    return HELP_TEXT[snapshot.mode]


def confirmation_lines(snapshot: Snapshot) -> list[str]:
    """Body of the delete dialog, empty when no confirmation is pending."""
    if not snapshot.show_confirmation:
        return []
    selected = snapshot.selected_item
    return [
        "Delete this todo?",
        "",
        selected.text if selected else "",
        "",
        "Press 'y' to confirm or 'n'/Esc to cancel",
    ]


def box_top(title: str, width: int) -> str:
    """Top border with the title set into it."""
    label = f" {title} " if title else ""
    fill = width - 2 - len(label)
    if fill < 1:
        label = label[: width - 3]
        fill = 1
    return BOX_TL + BOX_H + label + BOX_H * (fill - 1) + BOX_TR


def box_bottom(width: int) -> str:
    return BOX_BL + BOX_H * (width - 2) + BOX_BR


def box_text(text: str, width: int, align: str = "left") -> str:
    """Create a box line with text."""
    content_width = width - 4  # Account for borders and padding
    if len(text) > content_width:
        text = text[:content_width - 1] + "…"

    if align == "center":
        padded = text.center(content_width)
    else:
        padded = text.ljust(content_width)

    return f"{BOX_V} {padded} {BOX_V}"


def box(title: str, lines: list[str], width: int, align: str = "left") -> list[str]:
    return [box_top(title, width)] + [box_text(line, width, align) for line in lines] + [box_bottom(width)]


def render_frame(snapshot: Snapshot, width: int = DEFAULT_WIDTH) -> str:
    """Draw the whole screen as text: input, list, status, dialog."""
    rows: list[str] = []
    rows += box(input_title(snapshot), [input_line(snapshot)], width)
    rows += box(list_title(snapshot), list_lines(snapshot), width)
    rows += box("Status", [status_line(snapshot)], width)

    dialog = confirmation_lines(snapshot)
    if dialog:
        rows += box("Confirm delete", dialog, width, align="center")

    return "\n".join(rows)


class TextRenderSink:
    """RenderSink that writes each frame to a text stream."""

    def __init__(self, stream: TextIO | None = None, width: int = DEFAULT_WIDTH) -> None:
        self._stream = stream or sys.stdout
        self._width = width
        self.frames = 0

    def render(self, snapshot: Snapshot) -> None:
        self._stream.write(render_frame(snapshot, self._width) + "\n")
        self.frames += 1
