# parser/grammar.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# LALR(1) grammar and parser for clock queries using SLY

"""Clock query grammar implementation using SLY parser generator.

Grammar Features:
- Clock literals with bare or double-quoted ids: {A:1, "node-2":3}
- Merge operator '||' (left-associative)
- increment(expr, id, delta) function form
- One boundary predicate at the top level: ~  =  @>  <@
- Scalar accessors valueof(expr) and valueat(expr, id) at the top level
- Parenthetical grouping
"""

from sly import Parser
from .lexer import ClockQueryLexer
from .ast_nodes import Expr, ClockLiteral, Merge, Increment, Relation, ValueOf, ValueAt
from .exceptions import ParseError
from utils.logger import get_logger


class _ClockQueryParser(Parser):
    """SLY-based LALR(1) parser for clock queries.

    Attributes:
        tokens: Token types from ClockQueryLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = ClockQueryLexer.tokens

    precedence = (("left", "MERGE"),)

    @_("expr")
    def query(self, p) -> Expr:
        """A bare clock expression."""
        return p.expr

    @_(
        "expr CONCURRENT expr",
        "expr SAME expr",
        "expr CONTAINS expr",
        "expr CONTAINED expr",
    )
    def query(self, p) -> Expr:
        """Boundary predicate between two clock expressions."""
        return Relation(p[1], p.expr0, p.expr1)

    @_("VALUEOF LPAREN expr RPAREN")
    def query(self, p) -> Expr:
        return ValueOf(p.expr)

    @_("VALUEAT LPAREN expr COMMA key RPAREN")
    def query(self, p) -> Expr:
        return ValueAt(p.expr, p.key)

    # Clock expressions
    @_("expr MERGE expr")
    def expr(self, p) -> Expr:
        return Merge(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        return p.expr

    @_("INCREMENT LPAREN expr COMMA key COMMA INT RPAREN")
    def expr(self, p) -> Expr:
        return Increment(p.expr, p.key, p.INT)

    @_("LBRACE RBRACE")
    def expr(self, p) -> Expr:
        return ClockLiteral(())

    @_("LBRACE pairs RBRACE")
    def expr(self, p) -> Expr:
        """Clock literal; each id may appear once."""
        seen = set()
        for key, _ts in p.pairs:
            if key in seen:
                raise ParseError(f"Duplicate id '{key}' in clock literal")
            seen.add(key)
        return ClockLiteral(tuple(p.pairs))

    @_("pair")
    def pairs(self, p):
        return [p.pair]

    @_("pairs COMMA pair")
    def pairs(self, p):
        return p.pairs + [p.pair]

    @_("key COLON INT")
    def pair(self, p):
        return (p.key, p.INT)

    # Keywords are valid ids inside clock literals
    @_("ID", "STRING", "INCREMENT", "VALUEOF", "VALUEAT")
    def key(self, p) -> str:
        return p[0]

    def parse(self, text: str) -> Expr:
        """Parse query text into an AST.

        Raises:
            ParseError: If the text is blank, holds an illegal character or
                does not match the grammar
        """
        if not text.strip():
            raise ParseError("Input query is empty.")

        get_logger().debug(f"Parsing query: {text}")
        try:
            ast_result = super().parse(ClockQueryLexer().tokenize(text))
        except ValueError as e:
            # illegal characters surface from the lexer mid-parse
            raise ParseError(str(e)) from e

        if ast_result is None:
            raise ParseError(f"Failed to parse query: {text}")
        return ast_result

    def error(self, token):
        if token is None:
            raise ParseError("Syntax error: Unexpected end of query")
        raise ParseError(
            f"Syntax error near '{token.value}' ({token.type}) at position {token.index}"
        )
