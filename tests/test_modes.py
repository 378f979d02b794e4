"""Tests for todotui.modes - the modal command state machine."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from todotui.modes import (  # noqa: E402
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
    Command,
    ModeController,
)
from todotui.providers import INITIAL_MODE, Mode  # noqa: E402
from todotui.state import AppState  # noqa: E402


def texts(items) -> list[str]:
    return [item.text for item in items]


def feed(controller: ModeController, *commands: Command) -> None:
    for command in commands:
        assert controller.handle(command) is True


def type_text(controller: ModeController, text: str) -> None:
    feed(controller, *(Command.of_char(c) for c in text))


@pytest.fixture
def controller() -> ModeController:
    return ModeController(AppState(["Learn Rust", "Build a TUI app"]))


class TestNormalMode:
    """Tests for command handling in NORMAL."""

    def test_initial_mode(self, controller: ModeController) -> None:
        assert INITIAL_MODE is Mode.NORMAL
        assert controller.mode is Mode.NORMAL

    def test_quit_stops_loop(self, controller: ModeController) -> None:
        assert controller.handle(QUIT) is False
        assert controller.mode is Mode.NORMAL

    def test_movement(self, controller: ModeController) -> None:
        feed(controller, MOVE_DOWN)
        assert controller.state.selection == 1
        feed(controller, MOVE_DOWN)
        assert controller.state.selection == 0
        feed(controller, MOVE_UP)
        assert controller.state.selection == 1

    def test_start_search(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH)
        assert controller.mode is Mode.SEARCHING

    def test_start_add_clears_buffer(self, controller: ModeController) -> None:
        controller.state.scratch_buffer = "leftover"
        feed(controller, START_ADD)
        assert controller.mode is Mode.ADDING
        assert controller.state.scratch_buffer == ""

    def test_start_delete_needs_selection(self) -> None:
        controller = ModeController(AppState([]))
        feed(controller, START_DELETE)
        assert controller.mode is Mode.NORMAL

    def test_start_edit_needs_selection(self) -> None:
        controller = ModeController(AppState([]))
        feed(controller, START_EDIT)
        assert controller.mode is Mode.NORMAL
        assert controller.state.scratch_buffer == ""

    def test_text_commands_ignored(self, controller: ModeController) -> None:
        feed(controller, Command.of_char("x"), BACKSPACE, CONFIRM, CANCEL, CONFIRM_YES)
        assert controller.mode is Mode.NORMAL
        assert texts(controller.state.items) == ["Learn Rust", "Build a TUI app"]


class TestSearching:
    """Tests for SEARCHING."""

    def test_typing_filters_each_keystroke(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH)
        type_text(controller, "tu")
        assert controller.state.filter_text == "tu"
        assert texts(controller.state.filtered_view) == ["Build a TUI app"]

    def test_backspace_widens_filter(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH)
        type_text(controller, "tux")
        assert controller.state.filtered_view == []
        feed(controller, BACKSPACE)
        assert controller.state.filter_text == "tu"
        assert len(controller.state.filtered_view) == 1

    def test_backspace_on_empty_filter(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH, BACKSPACE)
        assert controller.state.filter_text == ""

    def test_confirm_keeps_filter(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH)
        type_text(controller, "rust")
        feed(controller, CONFIRM)
        assert controller.mode is Mode.NORMAL
        assert controller.state.filter_text == "rust"
        assert texts(controller.state.filtered_view) == ["Learn Rust"]

    def test_cancel_clears_filter(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH)
        type_text(controller, "rust")
        feed(controller, CANCEL)
        assert controller.mode is Mode.NORMAL
        assert controller.state.filter_text == ""
        assert len(controller.state.filtered_view) == 2

    def test_quit_ignored_while_searching(self, controller: ModeController) -> None:
        feed(controller, START_SEARCH, QUIT)
        assert controller.mode is Mode.SEARCHING


class TestAdding:
    """Tests for ADDING."""

    def test_add_flow(self, controller: ModeController) -> None:
        feed(controller, START_ADD)
        assert controller.mode is Mode.ADDING
        type_text(controller, "xy")
        feed(controller, CONFIRM)
        assert texts(controller.state.items)[-1] == "xy"
        assert controller.mode is Mode.NORMAL
        assert controller.state.scratch_buffer == ""

    def test_backspace_edits_buffer(self, controller: ModeController) -> None:
        feed(controller, START_ADD)
        type_text(controller, "abc")
        feed(controller, BACKSPACE)
        assert controller.state.scratch_buffer == "ab"

    def test_confirm_empty_adds_nothing(self, controller: ModeController) -> None:
        feed(controller, START_ADD, CONFIRM)
        assert len(controller.state.items) == 2
        assert controller.mode is Mode.NORMAL

    def test_cancel_discards(self, controller: ModeController) -> None:
        feed(controller, START_ADD)
        type_text(controller, "never")
        feed(controller, CANCEL)
        assert len(controller.state.items) == 2
        assert controller.state.scratch_buffer == ""
        assert controller.mode is Mode.NORMAL

    def test_letters_are_text_not_commands(self, controller: ModeController) -> None:
        feed(controller, START_ADD)
        type_text(controller, "qadj/")
        assert controller.mode is Mode.ADDING
        assert controller.state.scratch_buffer == "qadj/"


class TestEditing:
    """Tests for EDITING."""

    def test_edit_flow(self, controller: ModeController) -> None:
        feed(controller, MOVE_DOWN, START_EDIT)
        assert controller.mode is Mode.EDITING
        assert controller.state.scratch_buffer == "Build a TUI app"

        for _ in "app":
            feed(controller, BACKSPACE)
        type_text(controller, "tool")
        feed(controller, CONFIRM)

        assert texts(controller.state.items) == ["Learn Rust", "Build a TUI tool"]
        assert controller.mode is Mode.NORMAL
        assert controller.state.scratch_buffer == ""

    def test_cancel_leaves_item(self, controller: ModeController) -> None:
        feed(controller, START_EDIT)
        type_text(controller, "!!!")
        feed(controller, CANCEL)
        assert texts(controller.state.items) == ["Learn Rust", "Build a TUI app"]
        assert controller.state.scratch_buffer == ""
        assert controller.mode is Mode.NORMAL

    def test_confirm_with_cleared_buffer_keeps_item(self, controller: ModeController) -> None:
        feed(controller, START_EDIT)
        for _ in "Learn Rust":
            feed(controller, BACKSPACE)
        feed(controller, CONFIRM)
        assert texts(controller.state.items) == ["Learn Rust", "Build a TUI app"]
        assert controller.mode is Mode.NORMAL


class TestConfirmingDelete:
    """Tests for CONFIRMING_DELETE."""

    def test_no_keeps_items(self) -> None:
        controller = ModeController(AppState(["a", "b"]))
        feed(controller, MOVE_DOWN, START_DELETE)
        assert controller.mode is Mode.CONFIRMING_DELETE
        assert controller.snapshot().show_confirmation is True

        feed(controller, CONFIRM_NO)
        assert controller.mode is Mode.NORMAL
        assert texts(controller.state.items) == ["a", "b"]
        assert controller.snapshot().show_confirmation is False

    def test_cancel_keeps_items(self) -> None:
        controller = ModeController(AppState(["a", "b"]))
        feed(controller, START_DELETE, CANCEL)
        assert controller.mode is Mode.NORMAL
        assert texts(controller.state.items) == ["a", "b"]

    def test_yes_deletes_selected(self) -> None:
        controller = ModeController(AppState(["a", "b"]))
        feed(controller, MOVE_DOWN, START_DELETE, CONFIRM_YES)
        assert controller.mode is Mode.NORMAL
        assert texts(controller.state.items) == ["a"]
        assert controller.state.selection == 0

    def test_other_commands_ignored(self) -> None:
        controller = ModeController(AppState(["a", "b"]))
        feed(controller, START_DELETE, MOVE_DOWN, Command.of_char("x"), CONFIRM, QUIT)
        assert controller.mode is Mode.CONFIRMING_DELETE
        assert controller.state.selection == 0


class TestSnapshot:
    """Tests for ModeController.snapshot."""

    def test_reports_mode_and_buffers(self, controller: ModeController) -> None:
        feed(controller, START_ADD)
        type_text(controller, "new")
        snap = controller.snapshot()
        assert snap.mode is Mode.ADDING
        assert snap.scratch_buffer == "new"
        assert snap.filter_text == ""
        assert [i.text for i in snap.filtered_view] == ["Learn Rust", "Build a TUI app"]
        assert snap.show_confirmation is False
