# index/penalty.py

"""
Insertion cost of routing a clock under an existing subtree summary.

The cost depends only on how the summary relates to the candidate:

    EQUAL      0.0   already represented
    UNORDERED  1.0   concurrent; the summary widens sideways
    GREATER    2.0   summary already dominates the candidate
    LESS       3.0   candidate dominates the summary, which must grow upward

Lower is better.
"""

from __future__ import annotations
from typing import Dict

from model.ordering import Ordering, compare
from model.vector_clock import VectorClock

PENALTIES: Dict[Ordering, float] = {
    Ordering.EQUAL: 0.0,
    Ordering.UNORDERED: 1.0,
    Ordering.GREATER: 2.0,
    Ordering.LESS: 3.0,
}


def insertion_penalty(summary: VectorClock, candidate: VectorClock) -> float:
    return PENALTIES[compare(summary, candidate)]
