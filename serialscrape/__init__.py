"""
serialscrape: serial traversal of sibling nodes in a parsed document.

Build traversals from step, seek and window primitives, compose them with
``map``/``and_then``/``or_else`` (or ``|``), then run them through
:func:`in_serial` to get an ordinary single-node scraper back.
"""

from .config import SerialSettings, get_settings, reset_settings
from .cursor import Cursor
from .errors import NonProgressingRepetitionError, SerialScrapeError, SerialUsageError
from .logging import configure_logging, get_logger
from .primitives import seek_back, seek_next, step_back, step_next, until_back, until_next
from .scope import in_serial, run_serial_scope, scope_nodes
from .scraper import Scraper, as_scraper
from .serial import (
    Serial,
    and_then,
    fail,
    many,
    map_serial,
    optional,
    or_else,
    sequence,
    sequenced,
    some,
    succeed,
)
from .tree import NodeSpec, ScrapeContext, Tree

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "NodeSpec",
    "NonProgressingRepetitionError",
    "ScrapeContext",
    "Scraper",
    "Serial",
    "SerialScrapeError",
    "SerialSettings",
    "SerialUsageError",
    "Tree",
    "and_then",
    "as_scraper",
    "configure_logging",
    "fail",
    "get_logger",
    "get_settings",
    "in_serial",
    "many",
    "map_serial",
    "optional",
    "or_else",
    "reset_settings",
    "run_serial_scope",
    "scope_nodes",
    "seek_back",
    "seek_next",
    "sequence",
    "sequenced",
    "some",
    "step_back",
    "step_next",
    "succeed",
    "until_back",
    "until_next",
]
