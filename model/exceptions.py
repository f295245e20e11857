# model/exceptions.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Exceptions for malformed vector clock values

"""Domain-specific exceptions for vector clock construction and decoding."""


class ClockFormatError(ValueError):
    """Raised when a clock value, its text form or its byte form is malformed.

    Covers non-string ids, non-integer counters, counters outside the signed
    64-bit range and encodings that are not a JSON object.
    """

    pass


class ClockOverflowError(ValueError):
    """Raised when an increment would push a counter past the 64-bit range."""

    pass
