# index/strategy.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Strategy numbers of the vector clock operator class

"""Strategy numbers bound to the boundary predicates.

The host index dispatches queries by a fixed strategy number. Each number
names the Ordering that `compare(entry, query)` must produce for a match:

    3  CONCURRENT  →  UNORDERED   (~)
    6  EQUAL       →  EQUAL       (=)
    7  GREATER     →  GREATER     (@>)
    8  LESS        →  LESS        (<@)

Any other number means the operator class was wired incorrectly. That is a
configuration fault rather than a data error, so it is reported with
OperatorClassError and never converted into a "no match".
"""

from __future__ import annotations
from enum import Enum

from model.ordering import Ordering
from model.predicates import Predicate, concurrent, same, contains, contained


class OperatorClassError(RuntimeError):
    """Raised when the index asks for a strategy the operator class does not define."""

    pass


class Strategy(Enum):
    """Strategy numbers understood by the vector clock operator class."""

    CONCURRENT = 3
    EQUAL = 6
    GREATER = 7
    LESS = 8

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def ordering(self) -> Ordering:
        return _ORDERINGS[self]

    @property
    def predicate(self) -> Predicate:
        return _PREDICATES[self]

    @classmethod
    def from_code(cls, code: int) -> Strategy:
        """Resolve a strategy number.

        Raises:
            OperatorClassError: If `code` is not one of 3, 6, 7, 8
        """
        try:
            return cls(code)
        except ValueError:
            raise OperatorClassError(f"Unrecognized strategy number: {code}") from None

    @classmethod
    def from_name(cls, name: str) -> Strategy:
        try:
            return cls[name.upper()]
        except KeyError:
            raise OperatorClassError(f"Unrecognized strategy name: {name}") from None


_ORDERINGS = {
    Strategy.CONCURRENT: Ordering.UNORDERED,
    Strategy.EQUAL: Ordering.EQUAL,
    Strategy.GREATER: Ordering.GREATER,
    Strategy.LESS: Ordering.LESS,
}

_PREDICATES = {
    Strategy.CONCURRENT: concurrent,
    Strategy.EQUAL: same,
    Strategy.GREATER: contains,
    Strategy.LESS: contained,
}
