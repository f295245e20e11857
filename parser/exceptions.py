# parser/exceptions.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Custom exceptions for clock query parsing


class ParseError(RuntimeError):
    """Exception raised when query parsing fails due to syntax errors.

    Indicates that the input does not conform to the clock query grammar,
    contains illegal characters, or repeats an id inside a clock literal.
    """

    pass
