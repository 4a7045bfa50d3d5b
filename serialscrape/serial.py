"""
Composable serial traversals.

A :class:`Serial` wraps a pure function ``Cursor -> Optional[(value, Cursor)]``.
Failure is ``None``. Since a failed run never hands back a cursor, the caller
keeps the one it started with, which is all the backtracking ``or_else`` and
friends need.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Generator, List, Optional, Tuple

from .config import get_settings
from .cursor import Cursor
from .errors import NonProgressingRepetitionError, SerialUsageError
from .logging import get_logger, trace_enabled

logger = get_logger(__name__)

Step = Optional[Tuple[Any, Cursor]]
StepFn = Callable[[Cursor], Step]


class Serial:
    """A unit of serial traversal logic."""

    __slots__ = ("_run", "name")

    def __init__(self, run: StepFn, name: str = "serial") -> None:
        self._run = run
        self.name = name

    def run(self, cursor: Cursor) -> Step:
        return self._run(cursor)

    def map(self, f: Callable[[Any], Any]) -> "Serial":
        """Apply ``f`` to the value of a successful run."""
        def mapped(cursor: Cursor) -> Step:
            result = self._run(cursor)
            if result is None:
                return None
            value, advanced = result
            return f(value), advanced
        return Serial(mapped, name=f"{self.name}.map")

    def and_then(self, f: Callable[[Any], "Serial"]) -> "Serial":
        """Run self, then the traversal ``f`` builds from its value."""
        def bound(cursor: Cursor) -> Step:
            result = self._run(cursor)
            if result is None:
                return None
            value, advanced = result
            return _require_serial(f(value), "and_then continuation").run(advanced)
        return Serial(bound, name=f"{self.name}.and_then")

    def then(self, other: "Serial") -> "Serial":
        """Run self, discard its value, then run ``other``."""
        _require_serial(other, "then")
        return self.and_then(lambda _: other)

    def or_else(self, other: "Serial") -> "Serial":
        """Try self; on failure run ``other`` from the same starting cursor."""
        _require_serial(other, "or_else")

        def choice(cursor: Cursor) -> Step:
            result = self._run(cursor)
            if result is not None:
                return result
            return other._run(cursor)
        return Serial(choice, name=f"({self.name} | {other.name})")

    def __or__(self, other: "Serial") -> "Serial":
        if not isinstance(other, Serial):
            return NotImplemented
        return self.or_else(other)

    def __repr__(self) -> str:
        return f"Serial({self.name})"


def _require_serial(candidate: Any, where: str) -> Serial:
    if not isinstance(candidate, Serial):
        raise SerialUsageError(
            f"{where} produced {type(candidate).__name__}, expected Serial",
            hint="Wrap plain values with succeed()",
        )
    return candidate


# ============================================================================
# Constructors and functional aliases
# ============================================================================

def succeed(value: Any) -> Serial:
    """Yield ``value`` without moving."""
    return Serial(lambda cursor: (value, cursor), name="succeed")


def fail() -> Serial:
    """Never produce a value."""
    return Serial(lambda cursor: None, name="fail")


def map_serial(serial: Serial, f: Callable[[Any], Any]) -> Serial:
    return serial.map(f)


def and_then(serial: Serial, f: Callable[[Any], Serial]) -> Serial:
    return serial.and_then(f)


def or_else(left: Serial, right: Serial) -> Serial:
    return left.or_else(right)


# ============================================================================
# Repetition and sequencing
# ============================================================================

def _same_position(before: Cursor, after: Cursor) -> bool:
    return after.entries is before.entries and after.focus == before.focus


def many(serial: Serial) -> Serial:
    """
    Run ``serial`` until it fails, collecting every value.

    Never fails: zero successes yields an empty list. An iteration that
    succeeds without moving would repeat forever, so it ends the loop (or
    raises when ``strict_repetition`` is set).
    """
    _require_serial(serial, "many")

    def repeated(cursor: Cursor) -> Step:
        values: List[Any] = []
        while True:
            result = serial.run(cursor)
            if result is None:
                return values, cursor
            value, advanced = result
            if _same_position(cursor, advanced):
                if get_settings().strict_repetition:
                    raise NonProgressingRepetitionError(
                        f"many({serial.name}) succeeded without moving the cursor",
                        hint="Repeat a traversal that steps or seeks",
                    )
                if trace_enabled(logger):
                    logger.debug("many(%s) stopped: no progress at %d", serial.name, cursor.focus)
                return values, cursor
            values.append(value)
            cursor = advanced
    return Serial(repeated, name=f"many({serial.name})")


def some(serial: Serial) -> Serial:
    """Like :func:`many` but fails unless ``serial`` succeeds at least once."""
    return many(serial).and_then(lambda values: succeed(values) if values else fail())


def optional(serial: Serial) -> Serial:
    """The value of ``serial``, or ``None`` without moving when it fails."""
    return serial.or_else(succeed(None))


def sequence(*serials: Serial) -> Serial:
    """Run each traversal in order and collect their values."""
    for serial in serials:
        _require_serial(serial, "sequence")

    def run_all(cursor: Cursor) -> Step:
        values: List[Any] = []
        for serial in serials:
            result = serial.run(cursor)
            if result is None:
                return None
            value, cursor = result
            values.append(value)
        return values, cursor
    return Serial(run_all, name="sequence")


def sequenced(fn: Callable[..., Generator[Serial, Any, Any]]) -> Callable[..., Serial]:
    """
    Build traversals from generator functions.

    Each ``yield`` hands a :class:`Serial` to the runner and receives its
    value back; the generator's return value becomes the traversal's value.
    The first failing step fails the whole traversal. A fresh generator is
    started for every run, so the resulting traversal stays reusable::

        @sequenced
        def section():
            heading = yield seek_next(text_of("h2"))
            body = yield until_next(is_tag("h2"), many(seek_next(text_of("p"))))
            return heading, body
    """
    if not inspect.isgeneratorfunction(fn):
        raise SerialUsageError(
            f"sequenced expects a generator function, got {fn!r}",
            hint="Use 'value = yield traversal' inside the decorated function",
        )

    @functools.wraps(fn)
    def factory(*args: Any, **kwargs: Any) -> Serial:
        def run(cursor: Cursor) -> Step:
            gen = fn(*args, **kwargs)
            try:
                try:
                    step = next(gen)
                except StopIteration as stop:
                    return stop.value, cursor
                while True:
                    result = _require_serial(step, fn.__name__).run(cursor)
                    if result is None:
                        return None
                    value, cursor = result
                    try:
                        step = gen.send(value)
                    except StopIteration as stop:
                        return stop.value, cursor
            finally:
                gen.close()
        return Serial(run, name=fn.__name__)
    return factory


__all__ = [
    "Serial",
    "succeed",
    "fail",
    "map_serial",
    "and_then",
    "or_else",
    "many",
    "some",
    "optional",
    "sequence",
    "sequenced",
]
