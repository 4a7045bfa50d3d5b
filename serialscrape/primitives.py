"""
Step, seek and window primitives.

Every primitive first moves the focus and then reads the node it landed on.
Reading a sentinel is a failed read; moving past one fails outright.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from .cursor import Cursor
from .logging import get_logger, trace_enabled
from .scraper import Scraper, as_scraper
from .serial import Serial, Step, _require_serial
from .tree import NodeSpec

logger = get_logger(__name__)

Move = Callable[[Cursor], Optional[Cursor]]


def _forward(cursor: Cursor) -> Optional[Cursor]:
    return cursor.move_next()


def _backward(cursor: Cursor) -> Optional[Cursor]:
    return cursor.move_prev()


def _read(scraper: Scraper, cursor: Cursor) -> Optional[Any]:
    spec = cursor.peek()
    if spec is None:
        return None
    return scraper.scrape(spec)


# ============================================================================
# Step
# ============================================================================

def _step_with(move: Move, scraper: Any, name: str) -> Serial:
    scraper = as_scraper(scraper)

    def step(cursor: Cursor) -> Step:
        moved = move(cursor)
        if moved is None:
            return None
        value = _read(scraper, moved)
        if value is None:
            return None
        return value, moved
    return Serial(step, name=f"{name}({scraper.name})")


def step_next(scraper: Any) -> Serial:
    """Move forward one node and run ``scraper`` on it."""
    return _step_with(_forward, scraper, "step_next")


def step_back(scraper: Any) -> Serial:
    """Move back one node and run ``scraper`` on it."""
    return _step_with(_backward, scraper, "step_back")


# ============================================================================
# Seek
# ============================================================================

def _seek_with(move: Move, scraper: Any, name: str) -> Serial:
    scraper = as_scraper(scraper)

    def seek(cursor: Cursor) -> Step:
        while True:
            moved = move(cursor)
            if moved is None:
                return None
            value = _read(scraper, moved)
            if value is not None:
                return value, moved
            cursor = moved
    return Serial(seek, name=f"{name}({scraper.name})")


def seek_next(scraper: Any) -> Serial:
    """
    Move forward until ``scraper`` succeeds on the focused node.

    Fails when the end of the sequence is reached first.
    """
    return _seek_with(_forward, scraper, "seek_next")


def seek_back(scraper: Any) -> Serial:
    """
    Move backward until ``scraper`` succeeds on the focused node.

    Fails when the start of the sequence is reached first.
    """
    return _seek_with(_backward, scraper, "seek_back")


# ============================================================================
# Window
# ============================================================================

def _until_with(move: Move, backward: bool, boundary: Any, inner: Serial, name: str) -> Serial:
    boundary = as_scraper(boundary)
    _require_serial(inner, name)

    def until(cursor: Cursor) -> Step:
        collected: List[NodeSpec] = []
        while True:
            moved = move(cursor)
            if moved is None:
                break
            spec = moved.peek()
            if spec is None or boundary.scrape(spec) is not None:
                break
            collected.append(spec)
            cursor = moved
        if backward:
            collected.reverse()
        window = Cursor.window(collected, at_end=backward)
        if trace_enabled(logger):
            logger.debug(
                "%s(%s) window of %d node(s), enclosing focus %d",
                name, boundary.name, len(collected), cursor.focus,
            )
        result = inner.run(window)
        if result is None:
            return None
        return result[0], cursor
    return Serial(until, name=f"{name}({boundary.name}, {inner.name})")


def until_next(boundary: Any, inner: Serial) -> Serial:
    """
    Collect nodes forward until ``boundary`` matches and run ``inner`` on them.

    The boundary node is not consumed: afterwards the focus rests just before
    it, so the next forward primitive sees it again. ``inner`` cannot see
    anything outside the collected nodes.
    """
    return _until_with(_forward, False, boundary, inner, "until_next")


def until_back(boundary: Any, inner: Serial) -> Serial:
    """
    Collect nodes backward until ``boundary`` matches and run ``inner`` on them.

    The window keeps document order and starts focused after its last node,
    so ``inner`` typically walks it with ``step_back``/``seek_back``.
    """
    return _until_with(_backward, True, boundary, inner, "until_back")


__all__ = [
    "step_next",
    "step_back",
    "seek_next",
    "seek_back",
    "until_next",
    "until_back",
]
