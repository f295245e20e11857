# parser/lexer.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Lexical analyzer for clock query tokenization using SLY

"""Lexical analyzer for clock query strings.

Breaks query text into tokens for the parser. Handles clock literals,
causal operators, function keywords and quoted ids while raising
meaningful errors for invalid characters.

Supported Tokens:
- Operators: ||, ~, =, @>, <@
- Punctuation: { } ( ) , :
- Keywords: increment, valueof, valueat
- Identifiers, double-quoted strings and (signed) integers
- Whitespace: ignored during tokenization
"""

import json

from sly import Lexer
from utils.logger import get_logger


class ClockQueryLexer(Lexer):
    """SLY-based lexer for clock query tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "ID",
        "STRING",
        "INT",
        "INCREMENT",
        "VALUEOF",
        "VALUEAT",
        "MERGE",
        "CONCURRENT",
        "SAME",
        "CONTAINS",
        "CONTAINED",
        "LBRACE",
        "RBRACE",
        "LPAREN",
        "RPAREN",
        "COMMA",
        "COLON",
    }

    ignore = " \t\r\n"

    # Multi-character operators first so they win over shorter prefixes
    MERGE = r"\|\|"
    CONTAINS = r"@>"
    CONTAINED = r"<@"
    CONCURRENT = r"~"
    SAME = r"="
    LBRACE = r"\{"
    RBRACE = r"\}"
    LPAREN = r"\("
    RPAREN = r"\)"
    COMMA = r","
    COLON = r":"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    ID["increment"] = "INCREMENT"
    ID["valueof"] = "VALUEOF"
    ID["valueat"] = "VALUEAT"

    @_(r'"(?:[^"\\]|\\.)*"')
    def STRING(self, t):
        t.value = json.loads(t.value)
        return t

    @_(r"-?\d+")
    def INT(self, t):
        t.value = int(t.value)
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
