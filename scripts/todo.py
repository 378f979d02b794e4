#!/usr/bin/env python3
"""
Todo List Editor

Interactive terminal editor for a list of short text items.

Usage:
    todo.py                         Launch the interactive TUI
    todo.py --empty                 Start with an empty list
    todo.py --seed-file list.json   Start from a seed file
    todo.py --once                  Print one frame and exit (no TUI)
    todo.py --keys "a x y enter"    Replay key names headlessly, print the result

Requirements:
    pip install textual jsonschema
"""

import argparse
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from todotui.keymap import decode_script  # noqa: E402
from todotui.logconfig import DEFAULT_LEVEL, setup_logging  # noqa: E402
from todotui.loop import LastFrameSink, run_loop  # noqa: E402
from todotui.modes import ModeController  # noqa: E402
from todotui.render import render_frame  # noqa: E402
from todotui.seed import DEFAULT_SEED, load_seed  # noqa: E402
from todotui.state import SELECTION_POLICIES, AppState  # noqa: E402

logger = logging.getLogger("todo")


def build_state(args: argparse.Namespace) -> AppState | None:
    """Create the initial AppState, or None if the seed file is unusable."""
    if args.empty:
        items: list[str] = []
    elif args.seed_file:
        ok, result = load_seed(args.seed_file)
        if not ok:
            print(result, file=sys.stderr)
            return None
        items = result
    else:
        items = list(DEFAULT_SEED)
    logger.debug("starting with %d items", len(items))
    return AppState(items, selection_policy=args.selection_policy)


def print_once(state: AppState) -> int:
    """Print a single frame of the initial state and exit."""
    print(render_frame(ModeController(state).snapshot()))
    return 0


def replay_keys(state: AppState, keys: str) -> int:
    """Feed key names through the loop without a terminal; print the last frame."""
    controller = ModeController(state)
    sink = LastFrameSink()
    final = run_loop(controller, decode_script(keys.split(), lambda: controller.mode), sink)
    print(render_frame(final))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Todo List Editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--seed-file",
        type=Path,
        help="JSON file with the initial items ({\"version\": 1, \"items\": [...]})",
    )
    source.add_argument(
        "--empty",
        action="store_true",
        help="Start with an empty list",
    )
    parser.add_argument(
        "--selection-policy",
        choices=SELECTION_POLICIES,
        default="item",
        help="Keep the selected item (item) or the selected row number (index) "
        "when the list changes (default: item)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print one frame and exit (no TUI)",
    )
    parser.add_argument(
        "--keys",
        help="Space-separated key names to replay without a TUI",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file (default: warnings to stderr, nothing while the TUI runs)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LEVEL,
        help=f"Log level (default: {DEFAULT_LEVEL}, env TODOTUI_LOG_LEVEL)",
    )

    args = parser.parse_args(argv)
    interactive = args.keys is None and not args.once
    setup_logging(args.log_level, args.log_file, interactive=interactive)

    state = build_state(args)
    if state is None:
        return 1

    if args.keys is not None:
        return replay_keys(state, args.keys)

    if args.once:
        return print_once(state)

    # Launch TUI
    from todotui.app import run

    run(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
