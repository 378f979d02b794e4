"""
Application state for the list editor.

Single owner of the item collection. Every mutation of the items or the
filter goes through here and ends in a recompute of the filtered view and a
re-clamp of the selection, so the view and the cursor can never drift from
the underlying list.

Operations are total: a missing selection or a vanished target degrades to
a no-op instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

from todotui.providers import INITIAL_MODE, ItemInfo, Mode, Snapshot

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]
SelectionPolicy = Literal["item", "index"]

SELECTION_POLICIES: tuple[str, ...] = ("item", "index")


@dataclass
class Item:
    """A stored list entry. The id is fixed at creation and never reused."""

    id: int
    text: str


class AppState:
    """Items, filter, filtered view, selection and the scratch buffer.

    ``selection_policy`` decides where the cursor lands after the view is
    rebuilt:

    - ``"item"`` (default): stay on the previously selected item while it is
      still visible, else fall back to the index clamp.
    - ``"index"``: keep the row number, clamped to the new view. An in-range
      index is left unchanged, so clearing a filter can move the cursor onto
      a different item. Use this to get the plain clamp-only behaviour, e.g.
      selecting "banana", filtering on "ban" then clearing the filter leaves
      row 0 ("apple") selected.
    """

    def __init__(
        self,
        items: Iterable[str] = (),
        selection_policy: SelectionPolicy = "item",
    ) -> None:
        if selection_policy not in SELECTION_POLICIES:
            raise ValueError(f"Unknown selection policy: {selection_policy}")
        self.selection_policy = selection_policy
        self._next_id = 1
        self.items: list[Item] = [self._new_item(text) for text in items if text]
        self.filter_text = ""
        self.filtered_view: list[Item] = []
        self.selection: int | None = None
        self.scratch_buffer = ""
        self._edit_target: int | None = None
        self._recompute()

    def _new_item(self, text: str) -> Item:
        item = Item(id=self._next_id, text=text)
        self._next_id += 1
        return item

    @property
    def selected_item(self) -> Item | None:
        """The item under the cursor, or None."""
        if self.selection is None or self.selection >= len(self.filtered_view):
            return None
        return self.filtered_view[self.selection]

    def _recompute(self) -> None:
        """Rebuild the filtered view from items and re-clamp the selection."""
        previous_index = self.selection
        previous = self.selected_item

        term = self.filter_text.lower()
        self.filtered_view = [item for item in self.items if term in item.text.lower()]

        if not self.filtered_view:
            self.selection = None
            return

        if self.selection_policy == "item" and previous is not None:
            for i, item in enumerate(self.filtered_view):
                if item.id == previous.id:
                    self.selection = i
                    return

        if previous_index is None:
            self.selection = 0
        else:
            self.selection = min(previous_index, len(self.filtered_view) - 1)

    def _find(self, item_id: int) -> int | None:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return None

    def move_selection(self, direction: Direction) -> None:
        """Move the cursor one step, wrapping at both ends."""
        length = len(self.filtered_view)
        if length == 0:
            return
        if self.selection is None:
            self.selection = 0
        elif direction == "up":
            self.selection = self.selection - 1 if self.selection > 0 else length - 1
        elif direction == "down":
            self.selection = self.selection + 1 if self.selection < length - 1 else 0
        logger.debug("selection moved %s -> %s", direction, self.selection)

    def set_filter(self, text: str) -> None:
        """Replace the filter text and refresh the view."""
        self.filter_text = text
        self._recompute()
        logger.debug(
            "filter %r matches %d of %d", text, len(self.filtered_view), len(self.items)
        )

    def add_item(self, text: str) -> None:
        """Append a new item. Empty text is ignored."""
        if not text:
            logger.debug("add ignored: empty text")
            return
        item = self._new_item(text)
        self.items.append(item)
        self.scratch_buffer = ""
        self._recompute()
        logger.info("added item %d: %r", item.id, text)

    def begin_edit(self) -> bool:
        """Load the selected item into the scratch buffer.

        Returns False when nothing is selected; the caller must then stay
        in its current mode.
        """
        item = self.selected_item
        if item is None:
            return False
        self._edit_target = item.id
        self.scratch_buffer = item.text
        return True

    def commit_edit(self) -> None:
        """Write the scratch buffer back to the item being edited.

        The target is the item that was selected when editing began. An empty
        buffer or a target that no longer exists leaves the list untouched.
        """
        target = self._edit_target
        if target is None and self.selected_item is not None:
            target = self.selected_item.id
        self._edit_target = None
        if target is None or not self.scratch_buffer:
            return

        index = self._find(target)
        if index is None:
            logger.warning("edit target %d no longer exists", target)
            return
        old_text = self.items[index].text
        self.items[index].text = self.scratch_buffer
        self._recompute()
        logger.info("edited item %d: %r -> %r", target, old_text, self.scratch_buffer)

    def delete_selected(self) -> None:
        """Remove the item under the cursor."""
        item = self.selected_item
        if item is None:
            return
        index = self._find(item.id)
        if index is None:
            logger.warning("delete target %d no longer exists", item.id)
            return
        del self.items[index]
        self._recompute()
        logger.info("deleted item %d: %r", item.id, item.text)

    def push_char(self, char: str) -> None:
        self.scratch_buffer += char

    def pop_char(self) -> None:
        self.scratch_buffer = self.scratch_buffer[:-1]

    def clear_scratch(self) -> None:
        self.scratch_buffer = ""
        self._edit_target = None

    def snapshot(self, mode: Mode = INITIAL_MODE) -> Snapshot:
        """Immutable copy of everything a renderer may look at."""
        return Snapshot(
            mode=mode,
            filter_text=self.filter_text,
            scratch_buffer=self.scratch_buffer,
            filtered_view=tuple(ItemInfo(item.id, item.text) for item in self.filtered_view),
            selection=self.selection,
            total_count=len(self.items),
        )
