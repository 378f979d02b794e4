"""Translate terminal key presses into commands for the current mode."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from todotui.modes import (
    BACKSPACE,
    CANCEL,
    CONFIRM,
    CONFIRM_NO,
    CONFIRM_YES,
    MOVE_DOWN,
    MOVE_UP,
    QUIT,
    START_ADD,
    START_DELETE,
    START_EDIT,
    START_SEARCH,
    TEXT_ENTRY_MODES,
    Command,
)
from todotui.providers import Mode

# Normal mode, looked up by printed character first, then by key name
NORMAL_CHARS = {
    "q": QUIT,
    "/": START_SEARCH,
    "a": START_ADD,
    "i": START_EDIT,
    "r": START_DELETE,
    "d": START_DELETE,
    "j": MOVE_DOWN,
    "k": MOVE_UP,
}

NORMAL_KEYS = {
    "escape": QUIT,
    "down": MOVE_DOWN,
    "up": MOVE_UP,
}

TEXT_ENTRY_KEYS = {
    "enter": CONFIRM,
    "escape": CANCEL,
    "backspace": BACKSPACE,
}

CONFIRM_CHARS = {
    "y": CONFIRM_YES,
    "n": CONFIRM_NO,
}

# Key names that stand for a printable character
NAMED_CHARACTERS = {
    "space": " ",
    "slash": "/",
}

HELP_TEXT = {
    Mode.NORMAL: "Normal Mode | q/esc: quit, /: search, a: add, i: edit, r/d: remove, j/k: move",
    Mode.SEARCHING: "Search Mode | Enter: apply filter, Esc: clear filter",
    Mode.ADDING: "Add Mode | Enter: save todo, Esc: cancel",
    Mode.EDITING: "Edit Mode | Enter: save changes, Esc: cancel",
    Mode.CONFIRMING_DELETE: "Delete? | y: continue, n/Esc: cancel",
}


def _printable(key: str, character: str | None) -> str | None:
    if character is not None and len(character) == 1 and character.isprintable():
        return character
    if len(key) == 1 and key.isprintable():
        return key
    return NAMED_CHARACTERS.get(key)


def decode_key(mode: Mode, key: str, character: str | None = None) -> Command | None:
    """Map a key name (and its printed character, if any) to a command.

    Returns None for keys that mean nothing in ``mode``.
    """
    char = _printable(key, character)

    if mode is Mode.NORMAL:
        if char is not None and char in NORMAL_CHARS:
            return NORMAL_CHARS[char]
        return NORMAL_KEYS.get(key)

    if mode in TEXT_ENTRY_MODES:
        if key in TEXT_ENTRY_KEYS:
            return TEXT_ENTRY_KEYS[key]
        if char is not None:
            return Command.of_char(char)
        return None

    if mode is Mode.CONFIRMING_DELETE:
        if key == "escape":
            return CANCEL
        if char is not None:
            return CONFIRM_CHARS.get(char)
    return None


def decode_script(keys: Iterable[str], mode_of: Callable[[], Mode]) -> Iterator[Command]:
    """Lazily decode key names, reading the mode at the moment each is used."""
    for key in keys:
        command = decode_key(mode_of(), key)
        if command is not None:
            yield command
