# model/predicates.py

"""
Boundary predicates over vector clocks.

Each predicate is a one-line view of `compare`. They are the queryable
operators of the value type and the targets of the index strategy numbers.
The symbols in OPERATORS are the stable names callers use to refer to them.
"""

from __future__ import annotations
from typing import Callable, Dict

from .ordering import Ordering, compare
from .vector_clock import VectorClock, merge

Predicate = Callable[[VectorClock, VectorClock], bool]


def concurrent(a: VectorClock, b: VectorClock) -> bool:
    """Neither clock happened before the other."""
    return compare(a, b) is Ordering.UNORDERED


def same(a: VectorClock, b: VectorClock) -> bool:
    """Both clocks describe the same causal history."""
    return compare(a, b) is Ordering.EQUAL


def contains(a: VectorClock, b: VectorClock) -> bool:
    """`a` strictly dominates `b` (b happened before a)."""
    return compare(a, b) is Ordering.GREATER


def contained(a: VectorClock, b: VectorClock) -> bool:
    """`a` is strictly dominated by `b` (a happened before b)."""
    return compare(a, b) is Ordering.LESS


OPERATORS: Dict[str, Predicate] = {
    "~": concurrent,
    "=": same,
    "@>": contains,
    "<@": contained,
}

MERGE_OPERATOR = "||"

BINARY_OPERATORS: Dict[str, Callable[[VectorClock, VectorClock], VectorClock]] = {
    MERGE_OPERATOR: merge,
}


def predicate_for(symbol: str) -> Predicate:
    """Look up a predicate by its operator symbol.

    Raises:
        KeyError: If `symbol` names no predicate
    """
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise KeyError(f"Unknown clock operator: {symbol!r}") from None
