# parser/__init__.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Clock query parsing and evaluation

"""Clock query parsing and evaluation.

Core Functions:
    parse: Converts query strings into Abstract Syntax Trees
    parse_clock: Parses a single clock literal into a VectorClock
    evaluate: Parses and evaluates a query in one step

Example:
    >>> from parser import evaluate
    >>> evaluate("{A:1, B:2} || {A:3} @> {A:1}")
    True
"""

from model.vector_clock import VectorClock
from .exceptions import ParseError
from .grammar import _ClockQueryParser
from .ast_nodes import ClockLiteral
from .evaluator import QueryEvaluator, QueryResult
from utils.logger import get_logger


def parse(source: str):
    """Parse a clock query string into an Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Query string to parse

    Returns:
        Root AST node representing the parsed query

    Raises:
        ParseError: Query syntax is malformed
    """
    logger = get_logger()
    parser = _ClockQueryParser()

    try:
        return parser.parse(source)

    except ParseError:
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_clock(source: str) -> VectorClock:
    """Parse a single clock literal such as '{A:1, B:2}'.

    Raises:
        ParseError: If the text is not exactly one clock literal
        ClockFormatError: If a counter is outside the 64-bit range
    """
    ast = parse(source)
    if not isinstance(ast, ClockLiteral):
        raise ParseError(f"Expected a clock literal, got: {source}")
    return QueryEvaluator().visit_clock(ast)


def evaluate(source: str) -> QueryResult:
    """Parse and evaluate a clock query.

    Returns:
        VectorClock for clock expressions, bool for relations, int for
        valueof/valueat

    Raises:
        ParseError: Query syntax is malformed
        ClockFormatError: A literal counter is outside the 64-bit range
        ClockOverflowError: An increment overflows its counter
    """
    return QueryEvaluator().evaluate(parse(source))


__all__ = ["parse", "parse_clock", "evaluate", "ParseError", "QueryEvaluator", "QueryResult"]
