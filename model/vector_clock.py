# model/vector_clock.py

"""
Immutable vector clock value.

Supports:
  •  increment of a single process counter.
  •  merge (pointwise maximum) to absorb a peer's causal history.
  •  partial-order comparison (<, <=, >, >=, ==) for happens-before checks.
  •  total value, usable as a grow-only counter.

Entries are kept sorted by id; the comparator relies on that order to
merge-join two clocks in linear time.
"""

from __future__ import annotations
import json
import re
from dataclasses import dataclass
from functools import reduce
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import ClockFormatError, ClockOverflowError
from .ordering import Ordering, compare

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_BARE_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _check_counter(pid: object, ts: object) -> None:
    if not isinstance(pid, str):
        raise ClockFormatError(f"Clock id must be a string, got {type(pid).__name__}")
    if isinstance(ts, bool) or not isinstance(ts, int):
        raise ClockFormatError(
            f"Counter for '{pid}' must be an integer, got {type(ts).__name__}"
        )
    if not INT64_MIN <= ts <= INT64_MAX:
        raise ClockFormatError(f"Counter for '{pid}' out of 64-bit range: {ts}")


@dataclass(frozen=True, slots=True)
class VectorClock:
    """Mapping from process id to counter; absent ids count as 0.

    Attributes:
        entries: Tuple of (process_id, counter) pairs sorted by process_id
    """

    entries: Tuple[Tuple[str, int], ...]

    def __init__(self, clock: Optional[Mapping[str, int]] = None) -> None:
        items = dict(clock or {})
        for pid, ts in items.items():
            _check_counter(pid, ts)
        object.__setattr__(self, "entries", tuple(sorted(items.items())))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def value_at(self, pid: str) -> int:
        """Counter at `pid`, or 0 if absent."""
        for key, ts in self.entries:
            if key == pid:
                return ts
            if key > pid:
                break
        return 0

    def total_value(self) -> int:
        """Sum of all counters; never decreases under increment or merge."""
        return sum(ts for _, ts in self.entries)

    def keys(self) -> Tuple[str, ...]:
        return tuple(pid for pid, _ in self.entries)

    def items(self) -> Tuple[Tuple[str, int], ...]:
        return self.entries

    def as_dict(self) -> Dict[str, int]:
        return dict(self.entries)

    def __getitem__(self, pid: str) -> int:
        return self.value_at(pid)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def increment(self, pid: str, delta: int = 1) -> VectorClock:
        """Return a clock whose counter at `pid` is raised by `delta`.

        A non-positive `delta` returns this clock unchanged.

        Raises:
            ClockOverflowError: If the counter would leave the 64-bit range
        """
        if delta <= 0:
            return self
        updated = dict(self.entries)
        value = updated.get(pid, 0) + delta
        if value > INT64_MAX:
            raise ClockOverflowError(f"Counter for '{pid}' overflows: {value}")
        updated[pid] = value
        return VectorClock(updated)

    def merge(self, other: VectorClock) -> VectorClock:
        """Pointwise maximum over the union of both id sets.

        Commutative, associative and idempotent, so it may be applied as a
        reduction in any order.
        """
        mine = dict(self.entries)
        theirs = dict(other.entries)
        return VectorClock(
            {pid: max(mine.get(pid, 0), theirs.get(pid, 0)) for pid in mine.keys() | theirs.keys()}
        )

    def __or__(self, other: object) -> VectorClock:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.merge(other)

    # ------------------------------------------------------------------
    # Partial order
    # ------------------------------------------------------------------

    def compare(self, other: VectorClock) -> Ordering:
        return compare(self, other)

    def concurrent(self, other: VectorClock) -> bool:
        """True if neither clock happened before the other."""
        return compare(self, other) is Ordering.UNORDERED

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return compare(self, other) in (Ordering.LESS, Ordering.EQUAL)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return compare(self, other) in (Ordering.GREATER, Ordering.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __hash__(self) -> int:
        # zero counters compare equal to absent ones
        return hash(tuple((pid, ts) for pid, ts in self.entries if ts != 0))

    def __str__(self) -> str:
        items = ", ".join(f"{render_id(pid)}:{ts}" for pid, ts in self.entries)
        return f"{{{items}}}"

    __repr__ = __str__


def render_id(pid: str) -> str:
    if _BARE_ID.fullmatch(pid):
        return pid
    return json.dumps(pid)


# ----------------------------------------------------------------------
# Functional interface
# ----------------------------------------------------------------------


def increment(clock: VectorClock, pid: str, delta: int) -> VectorClock:
    return clock.increment(pid, delta)


def merge(a: VectorClock, b: VectorClock) -> VectorClock:
    return a.merge(b)


def total_value(clock: VectorClock) -> int:
    return clock.total_value()


def value_at(clock: VectorClock, pid: str) -> int:
    return clock.value_at(pid)


def max_aggregate(clocks: Iterable[VectorClock]) -> VectorClock:
    """Merge an arbitrary collection of clocks; the empty collection yields {}.

    Partial results of disjoint batches can be combined with `merge`.
    """
    return reduce(merge, clocks, VectorClock())
