# model/__init__.py

"""
The vector clock value type and its causal-order algebra:
construction and merge, three-valued-plus-unordered comparison, the
boundary predicates exposed as query operators, and value encodings.
These types carry no index logic.
"""

from .vector_clock import (
    VectorClock,
    increment,
    merge,
    total_value,
    value_at,
    max_aggregate,
)
from .ordering import Ordering, compare, equals
from .predicates import concurrent, same, contains, contained, OPERATORS, predicate_for
from .codec import encode, decode, to_text, from_text, to_compact, parse_compact
from .exceptions import ClockFormatError, ClockOverflowError

__all__ = [
    "VectorClock",
    "increment",
    "merge",
    "total_value",
    "value_at",
    "max_aggregate",
    "Ordering",
    "compare",
    "equals",
    "concurrent",
    "same",
    "contains",
    "contained",
    "OPERATORS",
    "predicate_for",
    "encode",
    "decode",
    "to_text",
    "from_text",
    "to_compact",
    "parse_compact",
    "ClockFormatError",
    "ClockOverflowError",
]
