# index/__init__.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Operator class public API for generalized search trees over vector clocks

"""Index support for vector clocks.

Provides the operator class a generalized search tree calls into so that
stored clocks can be organized by causal relationship: strategy numbers for
the boundary predicates, the consistency test, subtree union, insertion
penalty and page split.

Example:
    >>> from index import IndexEntry, Strategy, VectorClockOps
    >>> from model import VectorClock
    >>> ops = VectorClockOps()
    >>> ops.consistent(IndexEntry(VectorClock({"A": 1})), VectorClock({"A": 2}), Strategy.LESS.value)
    True
"""

from .entry import IndexEntry
from .penalty import PENALTIES, insertion_penalty
from .split import DEFAULT_MIN_FILL_FRACTION, SplitResult, choose_seeds, min_fill_count, pick_split
from .strategy import OperatorClassError, Strategy
from .support import SUPPORT_SLOTS, GistSupport, VectorClockOps, scan

__all__ = [
    "IndexEntry",
    "PENALTIES",
    "insertion_penalty",
    "DEFAULT_MIN_FILL_FRACTION",
    "SplitResult",
    "choose_seeds",
    "min_fill_count",
    "pick_split",
    "OperatorClassError",
    "Strategy",
    "SUPPORT_SLOTS",
    "GistSupport",
    "VectorClockOps",
    "scan",
]
