"""
Synchronous session loop.

One iteration is one render, one command, one state update. The loop never
blocks on its own; waiting happens inside the command source.
"""

from __future__ import annotations

import logging
from typing import Iterable

from todotui.modes import Command, ModeController
from todotui.providers import RenderSink, Snapshot

logger = logging.getLogger(__name__)


class LastFrameSink:
    """RenderSink that only remembers the most recent snapshot."""

    def __init__(self) -> None:
        self.snapshot: Snapshot | None = None
        self.frames = 0

    def render(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.frames += 1


def run_loop(
    controller: ModeController,
    commands: Iterable[Command],
    sink: RenderSink,
) -> Snapshot:
    """Drive the controller until quit is accepted or the commands run out.

    Every state the user could act on is rendered before the next command is
    requested, including the one left behind when the loop ends.
    """
    source = iter(commands)
    handled = 0
    while True:
        snapshot = controller.snapshot()
        sink.render(snapshot)
        command = next(source, None)
        if command is None:
            logger.debug("command source exhausted after %d commands", handled)
            return snapshot
        handled += 1
        if not controller.handle(command):
            logger.debug("loop stopped by quit after %d commands", handled)
            return controller.snapshot()
