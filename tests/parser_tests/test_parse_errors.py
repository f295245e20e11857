# tests/parser_tests/test_parse_errors.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Test suite for clock query syntax validation and error handling

"""Test suite for clock query syntax validation and error handling.

This module tests that malformed queries are rejected with ParseError and
that the messages point at the offending input.
"""

import pytest
from parser import ParseError, parse, parse_clock
from utils.logger import get_logger


class TestClockQuerySyntaxErrors:
    """Test cases for clock query syntax validation."""

    def setup_method(self):
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        # Literal errors
        ("{A:1", "Unclosed clock literal"),
        ("{A:1,}", "Trailing comma"),
        ("{A}", "Id without counter"),
        ("{:1}", "Counter without id"),
        ("{A:x}", "Non-integer counter"),
        ("{A:1.5}", "Fractional counter"),
        ("{A:1, A:2}", "Duplicate id"),
        ("A", "Bare id outside a literal"),
        # Operator errors
        ("{A:1} {B:1}", "Missing operator between clocks"),
        ("{A:1} ||", "Trailing merge operator"),
        ("|| {A:1}", "Leading merge operator"),
        ("{A:1} ~ {B:1} ~ {C:1}", "Chained relation"),
        ("({A:1} ~ {B:1})", "Relation inside parentheses"),
        ("{A:1} | {B:1}", "Single bar"),
        # Function errors
        ("increment({A:1}, A)", "Missing delta"),
        ("increment({A:1}, 1, A)", "Arguments out of order"),
        ("valueof({A:1}) @> {A:1}", "Scalar used as clock"),
        ("valueat({A:1})", "Missing id"),
        ("increment", "Keyword without arguments"),
        # Grouping errors
        ("(({A:1})", "Unclosed parenthesis"),
        ("{A:1})", "Unopened parenthesis"),
        ("()", "Empty parentheses"),
        # Empty/whitespace errors
        ("", "Empty input string"),
        ("     ", "Whitespace only input"),
        ("\t\n", "Whitespace only with tabs/newlines"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_parse_error_handling(self, invalid_input, description):
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(ParseError) as exc_info:
            parse(invalid_input)

        error_message = str(exc_info.value)
        self.logger.debug(f"Parse error message: {error_message}")
        assert len(error_message) > 0, "ParseError should have non-empty message"

    SPECIFIC_MESSAGES = [
        ("", "empty"),
        ("   ", "empty"),
        ("{A:1", "Unexpected end"),
        ("{A:1} ||", "Unexpected end"),
        ("{A:1,}", "near '}'"),
        ("{A:1} {B:1}", "near '{'"),
        ("{A:x}", "near 'x'"),
        ("{A:1, A:2}", "Duplicate id 'A'"),
        ("{A:1} # {B:1}", "Illegal character '#'"),
    ]

    @pytest.mark.parametrize("invalid_input, expected_content", SPECIFIC_MESSAGES)
    def test_specific_error_messages(self, invalid_input, expected_content):
        with pytest.raises(ParseError) as exc_info:
            parse(invalid_input)

        assert expected_content in str(exc_info.value)

    def test_error_reports_token_position(self):
        with pytest.raises(ParseError, match="at position 5"):
            parse("{A:1,}")

    @pytest.mark.parametrize(
        "source",
        ["{A:1} || {B:1}", "increment({}, A, 1)", "{A:1} = {A:1}", "valueof({A:1})"],
    )
    def test_parse_clock_requires_a_literal(self, source):
        with pytest.raises(ParseError, match="Expected a clock literal"):
            parse_clock(source)
