# index/support.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Operator class that lets a generalized search tree organize vector clocks

"""Support functions of the vector clock operator class.

A generalized search tree knows nothing about the keys it stores; it calls
back into an operator class for every decision. GistSupport names that
capability. VectorClockOps implements it with the comparator and merge from
`model`, so the tree organizes clocks by causal relationship:

    slot 1  consistent   does an entry satisfy a strategy for a query?
    slot 2  union        merged summary of a set of entries
    slot 3  compress     stored form of an entry (identity)
    slot 4  decompress   working form of an entry (identity)
    slot 5  penalty      cost of inserting under a summary
    slot 6  pick_split   partition of an overflowing page
    slot 7  same         equality of two keys

All functions are pure; the host owns pages, traversal and locking.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple, Union

from model.ordering import compare
from model.vector_clock import VectorClock, max_aggregate
from utils.logger import get_logger
from .entry import IndexEntry
from .penalty import insertion_penalty
from .split import DEFAULT_MIN_FILL_FRACTION, SplitResult, pick_split
from .strategy import Strategy

SUPPORT_SLOTS: Dict[int, str] = {
    1: "consistent",
    2: "union",
    3: "compress",
    4: "decompress",
    5: "penalty",
    6: "pick_split",
    7: "same",
}

ClockLike = Union[IndexEntry, VectorClock]


class GistSupport(Protocol):
    """Interface a generalized search tree requires from an operator class."""

    def consistent(self, entry: IndexEntry, query: VectorClock, strategy: int) -> bool: ...

    def union(self, entries: Sequence[IndexEntry]) -> VectorClock: ...

    def compress(self, entry: IndexEntry) -> IndexEntry: ...

    def decompress(self, entry: IndexEntry) -> IndexEntry: ...

    def penalty(self, existing: ClockLike, candidate: ClockLike) -> float: ...

    def pick_split(self, entries: Sequence[IndexEntry]) -> SplitResult: ...

    def same(self, a: ClockLike, b: ClockLike) -> bool: ...


def _clock_of(value: ClockLike) -> VectorClock:
    if isinstance(value, VectorClock):
        return value
    clock = value.clock()
    return clock if clock is not None else VectorClock()


class VectorClockOps:
    """GistSupport implementation for VectorClock keys.

    Attributes:
        min_fill_fraction: Minimum share of a split page each side receives
    """

    def __init__(self, min_fill_fraction: float = DEFAULT_MIN_FILL_FRACTION):
        self.min_fill_fraction = min_fill_fraction

    def support(self, slot: int):
        """Return the support function registered at `slot`."""
        return getattr(self, SUPPORT_SLOTS[slot])

    def consistent(self, entry: IndexEntry, query: VectorClock, strategy: int) -> bool:
        """Whether `compare(entry, query)` is the ordering named by `strategy`.

        The answer is exact; no recheck is ever needed. Entries without a
        decodable key never match.

        Raises:
            OperatorClassError: If `strategy` is not a known strategy number
        """
        resolved = Strategy.from_code(strategy)
        clock = entry.clock()
        matched = clock is not None and compare(clock, query) is resolved.ordering
        logger = get_logger()
        if logger.is_debug():
            logger.strategy_dispatch(str(resolved), str(clock), str(query), matched)
        return matched

    def union(self, entries: Sequence[IndexEntry]) -> VectorClock:
        """Least upper bound of the entries' clocks."""
        clocks = []
        for entry in entries:
            clock = entry.clock()
            if clock is not None:
                clocks.append(clock)
        if len(clocks) == 1:
            return clocks[0]
        return max_aggregate(clocks)

    def compress(self, entry: IndexEntry) -> IndexEntry:
        return entry

    def decompress(self, entry: IndexEntry) -> IndexEntry:
        return entry

    def penalty(self, existing: ClockLike, candidate: ClockLike) -> float:
        return insertion_penalty(_clock_of(existing), _clock_of(candidate))

    def pick_split(self, entries: Sequence[IndexEntry]) -> SplitResult:
        return pick_split(entries, self.min_fill_fraction)

    def same(self, a: ClockLike, b: ClockLike) -> bool:
        return _clock_of(a) == _clock_of(b)


def scan(
    clocks: Iterable[Tuple[str, VectorClock]], query: VectorClock, strategy: int
) -> List[str]:
    """Evaluate a strategy against every clock without an index.

    This is the O(n·k) sequential baseline the operator class lets a tree
    avoid.

    Args:
        clocks: (label, clock) pairs
        query: Clock on the right-hand side of the predicate
        strategy: Strategy number

    Returns:
        Labels of matching clocks in input order
    """
    ops = VectorClockOps()
    return [label for label, clock in clocks if ops.consistent(IndexEntry(clock), query, strategy)]
