"""
Todo TUI - modal terminal list editor.

Architecture:
- providers.py: Snapshot dataclasses and the input/render protocols
- state.py: AppState, the single owner of items, filter and selection
- modes.py: ModeController, the five-mode command state machine
- keymap.py / render.py: key decoding and plain-text frames
- loop.py: synchronous render/read/dispatch loop
- views/ + app.py: Textual front end

Extensibility points:
1. New front ends: implement RenderSink and feed commands to run_loop
2. New key bindings: extend the tables in keymap.py
"""

__version__ = "0.1.0"

from todotui.modes import Command, CommandKind, ModeController
from todotui.providers import INITIAL_MODE, ItemInfo, Mode, Snapshot
from todotui.state import AppState

__all__ = [
    "AppState",
    "Command",
    "CommandKind",
    "INITIAL_MODE",
    "ItemInfo",
    "Mode",
    "ModeController",
    "Snapshot",
]
