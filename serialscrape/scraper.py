"""Single-node scraper value type.

A scraper looks at one :class:`~serialscrape.tree.NodeSpec` and either yields
a value or ``None`` for no result. Serial traversals only sequence calls to
scrapers, they never look inside the nodes themselves.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .tree import NodeSpec

ScrapeFn = Callable[[NodeSpec], Optional[Any]]


class Scraper:
    """Wraps a ``NodeSpec -> Optional[value]`` function."""

    __slots__ = ("_fn", "name")

    def __init__(self, fn: ScrapeFn, name: Optional[str] = None) -> None:
        if not callable(fn):
            raise TypeError(f"Scraper expects a callable, got {type(fn).__name__}")
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "scraper")

    def scrape(self, spec: NodeSpec) -> Optional[Any]:
        return self._fn(spec)

    __call__ = scrape

    def map(self, f: Callable[[Any], Any]) -> "Scraper":
        """Apply ``f`` to a successful result."""
        def mapped(spec: NodeSpec) -> Optional[Any]:
            value = self._fn(spec)
            return None if value is None else f(value)
        return Scraper(mapped, name=f"{self.name}.map")

    def __repr__(self) -> str:
        return f"Scraper({self.name})"


def as_scraper(candidate: Any) -> Scraper:
    """Accept either a :class:`Scraper` or a plain callable."""
    if isinstance(candidate, Scraper):
        return candidate
    return Scraper(candidate)


__all__ = ["Scraper", "ScrapeFn", "as_scraper"]
