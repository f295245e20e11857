# model/ordering.py

"""
Partial-order comparison of vector clocks.

Two clocks are related in one of four ways: EQUAL, LESS (happened before),
GREATER (happened after) or UNORDERED (concurrent). The comparison walks both
clocks' id-sorted entries in a single merge-join; an id present on only one
side is compared against an implicit 0.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator, Tuple

if TYPE_CHECKING:
    from .vector_clock import VectorClock


class Ordering(Enum):
    """Causal relationship between two vector clocks."""

    EQUAL = auto()
    LESS = auto()
    GREATER = auto()
    UNORDERED = auto()

    def __str__(self) -> str:
        return self.name

    def reversed(self) -> Ordering:
        """Relationship seen from the other operand."""
        if self is Ordering.LESS:
            return Ordering.GREATER
        if self is Ordering.GREATER:
            return Ordering.LESS
        return self

    def combine(self, step: Ordering) -> Ordering:
        """Fold the relationship observed at one id into a running relationship.

        EQUAL steps never change the running value; a running EQUAL adopts the
        step; LESS and GREATER together collapse to UNORDERED.
        """
        if step is Ordering.EQUAL or self is step:
            return self
        if self is Ordering.EQUAL:
            return step
        return Ordering.UNORDERED

    @classmethod
    def of(cls, left: int, right: int) -> Ordering:
        """Ordering of two plain counters."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


def _aligned(
    left: Tuple[Tuple[str, int], ...], right: Tuple[Tuple[str, int], ...]
) -> Iterator[Tuple[int, int]]:
    """Yield (left, right) counter pairs for every id in ascending order.

    Both inputs must be sorted by id. Ids missing on one side pair with 0.
    """
    i = j = 0
    while i < len(left) and j < len(right):
        lk, lv = left[i]
        rk, rv = right[j]
        if lk == rk:
            yield lv, rv
            i += 1
            j += 1
        elif lk < rk:
            yield lv, 0
            i += 1
        else:
            yield 0, rv
            j += 1
    for _, lv in left[i:]:
        yield lv, 0
    for _, rv in right[j:]:
        yield 0, rv


def compare(a: VectorClock, b: VectorClock) -> Ordering:
    """Determine the causal relationship of `a` relative to `b`.

    Runs in time linear in the number of distinct ids and stops at the first
    id that makes the pair UNORDERED.
    """
    result = Ordering.EQUAL
    for lv, rv in _aligned(a.entries, b.entries):
        result = result.combine(Ordering.of(lv, rv))
        if result is Ordering.UNORDERED:
            break
    return result


def equals(a: VectorClock, b: VectorClock) -> bool:
    """True if `a` and `b` describe the same causal history."""
    return compare(a, b) is Ordering.EQUAL


def disagreements(a: VectorClock, b: VectorClock) -> int:
    """Number of ids on which the two clocks hold different counters."""
    return sum(1 for lv, rv in _aligned(a.entries, b.entries) if lv != rv)
