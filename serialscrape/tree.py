"""
Document data model consumed by serial traversals.

The parser that produces these values lives outside this package. Traversals
only hold and pass :class:`NodeSpec` references around; labels are never
inspected here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Tree:
    """A rose tree node: an opaque label plus ordered children."""
    label: Any = None
    children: Tuple["Tree", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def node(cls, label: Any, *children: "Tree") -> "Tree":
        return cls(label=label, children=children)


@dataclass(frozen=True)
class ScrapeContext:
    """
    Context handed to scrapers together with a node.

    in_chroot: the spec is focused on a single container, so a serial scope
        opened on it walks that container's children rather than the forest.
    """
    in_chroot: bool = False


@dataclass(frozen=True)
class NodeSpec:
    """
    Reference to one or more parsed root trees plus their context.

    forest: Root trees in document order (usually exactly one)
    context: Scrape context for the focus
    document: Opaque payload shared by every spec cut from the same document
    """
    forest: Tuple[Tree, ...] = ()
    context: ScrapeContext = field(default_factory=ScrapeContext)
    document: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.forest, tuple):
            object.__setattr__(self, "forest", tuple(self.forest))

    @classmethod
    def of(
        cls,
        tree: Tree,
        *,
        context: Optional[ScrapeContext] = None,
        document: Any = None,
    ) -> "NodeSpec":
        """Build a spec focused on a single tree."""
        return cls(forest=(tree,), context=context or ScrapeContext(), document=document)

    @classmethod
    def of_forest(cls, trees: Iterable[Tree], *, document: Any = None) -> "NodeSpec":
        """Build a top-level spec over several sibling trees."""
        return cls(forest=tuple(trees), document=document)

    @property
    def root(self) -> Optional[Tree]:
        return self.forest[0] if self.forest else None

    def with_root(self, tree: Tree) -> "NodeSpec":
        """Spec for ``tree`` sharing this spec's document and context."""
        return replace(self, forest=(tree,))

    def chrooted(self) -> "NodeSpec":
        return replace(self, context=replace(self.context, in_chroot=True))


__all__ = ["Tree", "ScrapeContext", "NodeSpec"]
