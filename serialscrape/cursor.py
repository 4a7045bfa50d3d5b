"""
Sentinel-bounded cursor over a sequence of sibling node specs.

Reads always happen after a move, so the focus may rest just off either end
of the real nodes. Those two positions hold ``None`` sentinels: valid to stand
on, invalid to read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .tree import NodeSpec

Entry = Optional[NodeSpec]


@dataclass(frozen=True)
class Cursor:
    """
    Immutable focus over ``[None, n1, ..., nk, None]``.

    Every move returns a new cursor, so a caller holding the old one can
    backtrack to it for free.
    """
    entries: Tuple[Entry, ...]
    focus: int = 0

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("Cursor requires at least one entry")
        if not 0 <= self.focus < len(self.entries):
            raise ValueError(
                f"Cursor focus {self.focus} outside 0..{len(self.entries) - 1}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, nodes: Iterable[NodeSpec]) -> "Cursor":
        """Bookend ``nodes`` with sentinels and focus the leading one."""
        return cls.window(nodes)

    @classmethod
    def window(cls, nodes: Iterable[NodeSpec], *, at_end: bool = False) -> "Cursor":
        """Fresh cursor over ``nodes``, focused on the leading or trailing sentinel."""
        entries = (None, *nodes, None)
        return cls(entries=entries, focus=len(entries) - 1 if at_end else 0)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move_next(self) -> Optional["Cursor"]:
        if self.at_end:
            return None
        return Cursor(self.entries, self.focus + 1)

    def move_prev(self) -> Optional["Cursor"]:
        if self.at_start:
            return None
        return Cursor(self.entries, self.focus - 1)

    def peek(self) -> Entry:
        return self.entries[self.focus]

    # ------------------------------------------------------------------
    # Insertion (focus moves onto the inserted entry)
    # ------------------------------------------------------------------

    def insert_left(self, entry: Entry) -> "Cursor":
        """Insert ``entry`` left of the focus and focus it.

        Kept as a zipper operation; windows are built in one go with
        :meth:`window`.
        """
        at = self.focus
        return Cursor(self.entries[:at] + (entry,) + self.entries[at:], at)

    def insert_right(self, entry: Entry) -> "Cursor":
        """Insert ``entry`` right of the focus and focus it (zipper operation)."""
        at = self.focus + 1
        return Cursor(self.entries[:at] + (entry,) + self.entries[at:], at)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def at_start(self) -> bool:
        return self.focus == 0

    @property
    def at_end(self) -> bool:
        return self.focus == len(self.entries) - 1

    @property
    def nodes(self) -> List[NodeSpec]:
        """Real node specs in document order."""
        return [entry for entry in self.entries if entry is not None]

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Cursor(focus={self.focus}, positions={len(self.entries)})"


__all__ = ["Cursor", "Entry"]
