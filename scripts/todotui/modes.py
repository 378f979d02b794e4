"""
Modal command dispatch.

The controller interprets one abstract key command against the current mode
and either mutates the AppState, changes mode, or both. Text input means a
search term in SEARCHING and item text in ADDING/EDITING; movement and the
single-letter commands only exist in NORMAL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from todotui.providers import INITIAL_MODE, Mode, Snapshot
from todotui.state import AppState

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    QUIT = "quit"
    START_SEARCH = "start_search"
    START_ADD = "start_add"
    START_EDIT = "start_edit"
    START_DELETE = "start_delete"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CHAR = "char"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    CONFIRM_YES = "confirm_yes"
    CONFIRM_NO = "confirm_no"


@dataclass(frozen=True)
class Command:
    """One decoded key press. ``char`` is only set for CHAR."""

    kind: CommandKind
    char: str | None = None

    @classmethod
    def of_char(cls, char: str) -> "Command":
        return cls(CommandKind.CHAR, char)


QUIT = Command(CommandKind.QUIT)
START_SEARCH = Command(CommandKind.START_SEARCH)
START_ADD = Command(CommandKind.START_ADD)
START_EDIT = Command(CommandKind.START_EDIT)
START_DELETE = Command(CommandKind.START_DELETE)
MOVE_UP = Command(CommandKind.MOVE_UP)
MOVE_DOWN = Command(CommandKind.MOVE_DOWN)
BACKSPACE = Command(CommandKind.BACKSPACE)
CONFIRM = Command(CommandKind.CONFIRM)
CANCEL = Command(CommandKind.CANCEL)
CONFIRM_YES = Command(CommandKind.CONFIRM_YES)
CONFIRM_NO = Command(CommandKind.CONFIRM_NO)

TEXT_ENTRY_MODES = (Mode.SEARCHING, Mode.ADDING, Mode.EDITING)


class ModeController:
    """Finite state machine over the five input modes."""

    def __init__(self, state: AppState, mode: Mode = INITIAL_MODE) -> None:
        self.state = state
        self.mode = mode

    def snapshot(self) -> Snapshot:
        return self.state.snapshot(self.mode)

    def _enter(self, mode: Mode) -> None:
        if mode is not self.mode:
            logger.debug("mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def handle(self, command: Command) -> bool:
        """Apply one command. Returns False once a quit has been accepted."""
        if self.mode is Mode.NORMAL:
            return self._handle_normal(command)
        if self.mode is Mode.SEARCHING:
            self._handle_searching(command)
        elif self.mode in (Mode.ADDING, Mode.EDITING):
            self._handle_text_entry(command)
        elif self.mode is Mode.CONFIRMING_DELETE:
            self._handle_confirming(command)
        return True

    def _handle_normal(self, command: Command) -> bool:
        kind = command.kind
        if kind is CommandKind.QUIT:
            logger.debug("quit accepted")
            return False
        if kind is CommandKind.START_SEARCH:
            self._enter(Mode.SEARCHING)
        elif kind is CommandKind.START_ADD:
            self.state.clear_scratch()
            self._enter(Mode.ADDING)
        elif kind is CommandKind.START_DELETE:
            if self.state.selection is not None:
                self._enter(Mode.CONFIRMING_DELETE)
        elif kind is CommandKind.START_EDIT:
            if self.state.selection is not None and self.state.begin_edit():
                self._enter(Mode.EDITING)
        elif kind is CommandKind.MOVE_UP:
            self.state.move_selection("up")
        elif kind is CommandKind.MOVE_DOWN:
            self.state.move_selection("down")
        return True

    def _handle_searching(self, command: Command) -> None:
        kind = command.kind
        if kind is CommandKind.CHAR and command.char:
            self.state.set_filter(self.state.filter_text + command.char)
        elif kind is CommandKind.BACKSPACE:
            self.state.set_filter(self.state.filter_text[:-1])
        elif kind is CommandKind.CONFIRM:
            # filter stays applied
            self._enter(Mode.NORMAL)
        elif kind is CommandKind.CANCEL:
            self.state.set_filter("")
            self._enter(Mode.NORMAL)

    def _handle_text_entry(self, command: Command) -> None:
        kind = command.kind
        if kind is CommandKind.CHAR and command.char:
            self.state.push_char(command.char)
        elif kind is CommandKind.BACKSPACE:
            self.state.pop_char()
        elif kind is CommandKind.CONFIRM:
            if self.mode is Mode.ADDING:
                self.state.add_item(self.state.scratch_buffer)
            else:
                self.state.commit_edit()
            self.state.clear_scratch()
            self._enter(Mode.NORMAL)
        elif kind is CommandKind.CANCEL:
            self.state.clear_scratch()
            self._enter(Mode.NORMAL)

    def _handle_confirming(self, command: Command) -> None:
        kind = command.kind
        if kind is CommandKind.CONFIRM_YES:
            self.state.delete_selected()
            self._enter(Mode.NORMAL)
        elif kind in (CommandKind.CONFIRM_NO, CommandKind.CANCEL):
            self._enter(Mode.NORMAL)
