"""Bridge from serial traversals back to single-node scrapers."""

from __future__ import annotations

from typing import Any, List, Optional

from .cursor import Cursor
from .logging import get_logger, trace_enabled
from .scraper import Scraper
from .serial import Serial, _require_serial
from .tree import NodeSpec

logger = get_logger(__name__)


def scope_nodes(spec: NodeSpec) -> Optional[List[NodeSpec]]:
    """
    Sibling specs visited by a serial scope opened on ``spec``.

    Inside a chroot the scope is the focused container's children; otherwise
    it is the spec's own forest. A spec with no root has no scope at all.
    """
    root = spec.root
    if root is None:
        return None
    trees = root.children if spec.context.in_chroot else spec.forest
    return [spec.with_root(tree) for tree in trees]


def run_serial_scope(spec: NodeSpec, serial: Serial) -> Optional[Any]:
    """Run ``serial`` over the scope of ``spec`` and return only its value."""
    nodes = scope_nodes(spec)
    if nodes is None:
        return None
    if trace_enabled(logger):
        logger.debug("serial scope %s over %d node(s)", serial.name, len(nodes))
    result = serial.run(Cursor.build(nodes))
    if result is None:
        return None
    return result[0]


def in_serial(serial: Serial) -> Scraper:
    """
    Turn a serial traversal into a scraper over the focused node's siblings.

    The cursor position left by the traversal is discarded.
    """
    _require_serial(serial, "in_serial")
    return Scraper(lambda spec: run_serial_scope(spec, serial), name=f"in_serial({serial.name})")


__all__ = ["scope_nodes", "run_serial_scope", "in_serial"]
