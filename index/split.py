# index/split.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Page split for overflowing index nodes

"""Partitioning of an overflowing page into two groups.

Vector clocks have no total order to sort by, so the split works like a
quadratic R-tree split driven by the causal penalty:

1. Seeds. The concurrent (UNORDERED) pair whose clocks disagree on the
   most ids. Without a concurrent pair, the pair with the largest
   difference in total value. Without that either (every clock equal),
   the first two entries.
2. Assignment. Remaining entries, in input order, go to the group whose
   union charges the smaller insertion penalty. Equal penalties go to the
   smaller group, then to the left.
3. Fill. Once a group holds ``n - min_fill`` entries, every remaining
   entry is forced into the other group.

Each step breaks ties by lowest input position, so a given page always
splits the same way.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from model.ordering import Ordering, compare, disagreements
from model.vector_clock import VectorClock
from utils.logger import get_logger
from .entry import IndexEntry
from .penalty import insertion_penalty

DEFAULT_MIN_FILL_FRACTION = 0.3


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Outcome of a page split.

    Attributes:
        left: Input positions assigned to the left page, ascending
        right: Input positions assigned to the right page, ascending
        left_union: Merged clock of the left group
        right_union: Merged clock of the right group
    """

    left: Tuple[int, ...]
    right: Tuple[int, ...]
    left_union: VectorClock
    right_union: VectorClock

    def groups(
        self, entries: Sequence[IndexEntry]
    ) -> Tuple[List[IndexEntry], List[IndexEntry]]:
        """Materialize both groups from the entries the split was computed on."""
        return [entries[i] for i in self.left], [entries[i] for i in self.right]


def min_fill_count(entry_count: int, fraction: float) -> int:
    """Smallest group size allowed for a page of `entry_count` entries."""
    # round() absorbs float noise such as 10 * 0.3 == 3.0000000000000004
    wanted = math.ceil(round(entry_count * fraction, 9))
    return max(1, min(entry_count // 2, wanted))


def choose_seeds(clocks: Sequence[VectorClock]) -> Tuple[int, int, str]:
    """Pick the two most dissimilar entries to start the groups from.

    Returns:
        (left position, right position, reason)
    """
    best: Optional[Tuple[int, int, int]] = None
    for i in range(len(clocks)):
        for j in range(i + 1, len(clocks)):
            if compare(clocks[i], clocks[j]) is not Ordering.UNORDERED:
                continue
            score = disagreements(clocks[i], clocks[j])
            if best is None or score > best[0]:
                best = (score, i, j)
    if best is not None:
        return best[1], best[2], f"concurrent, {best[0]} differing ids"

    totals = [clock.total_value() for clock in clocks]
    best = None
    for i in range(len(clocks)):
        for j in range(i + 1, len(clocks)):
            spread = abs(totals[i] - totals[j])
            if spread > 0 and (best is None or spread > best[0]):
                best = (spread, i, j)
    if best is not None:
        return best[1], best[2], f"total value spread {best[0]}"

    return 0, 1, "all clocks equal"


def pick_split(
    entries: Sequence[IndexEntry],
    min_fill_fraction: float = DEFAULT_MIN_FILL_FRACTION,
) -> SplitResult:
    """Partition `entries` into two non-empty groups for a page split.

    Args:
        entries: Keys of the overflowing page
        min_fill_fraction: Minimum share of entries each group must receive

    Returns:
        SplitResult with both groups' positions and unions

    Raises:
        ValueError: If fewer than two entries are given or the fraction is
            outside (0, 0.5]
    """
    if len(entries) < 2:
        raise ValueError(f"Cannot split fewer than 2 entries (got {len(entries)})")
    if not 0 < min_fill_fraction <= 0.5:
        raise ValueError(f"min_fill_fraction must be in (0, 0.5], got {min_fill_fraction}")

    logger = get_logger()

    # undecodable keys carry no causal history
    clocks = []
    for entry in entries:
        clock = entry.clock()
        clocks.append(clock if clock is not None else VectorClock())

    n = len(clocks)
    min_fill = min_fill_count(n, min_fill_fraction)
    capacity = n - min_fill
    logger.split_start(n, min_fill)

    seed_left, seed_right, reason = choose_seeds(clocks)
    logger.split_seeds(seed_left, seed_right, reason)

    left, right = [seed_left], [seed_right]
    left_union, right_union = clocks[seed_left], clocks[seed_right]

    for pos in range(n):
        if pos in (seed_left, seed_right):
            continue
        clock = clocks[pos]

        forced = True
        if len(left) >= capacity:
            to_left = False
        elif len(right) >= capacity:
            to_left = True
        else:
            forced = False
            left_cost = insertion_penalty(left_union, clock)
            right_cost = insertion_penalty(right_union, clock)
            if left_cost != right_cost:
                to_left = left_cost < right_cost
            else:
                to_left = len(left) <= len(right)

        if to_left:
            left.append(pos)
            left_union = left_union.merge(clock)
        else:
            right.append(pos)
            right_union = right_union.merge(clock)
        logger.split_assignment(pos, "left" if to_left else "right", forced)

    logger.split_result(str(left_union), str(right_union))
    return SplitResult(tuple(sorted(left)), tuple(sorted(right)), left_union, right_union)
