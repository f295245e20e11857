# parser/evaluator.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Visitor that evaluates clock query ASTs

"""Evaluation of parsed clock queries.

Clock expressions evaluate to VectorClock values, relations to bool and the
scalar accessors to int. Operators resolve through the symbol tables in
`model.predicates`, so the query language and the index strategies share
one definition of each relation.
"""

from __future__ import annotations
from typing import Union

from model.predicates import BINARY_OPERATORS, MERGE_OPERATOR, predicate_for
from model.vector_clock import VectorClock
from .ast_nodes import ClockLiteral, Expr, Increment, Merge, Relation, ValueAt, ValueOf

QueryResult = Union[VectorClock, bool, int]


class QueryEvaluator:
    """Visitor computing the value of a query AST."""

    def evaluate(self, node: Expr) -> QueryResult:
        return node.accept(self)

    def visit_clock(self, n: ClockLiteral) -> VectorClock:
        return VectorClock(dict(n.pairs))

    def visit_merge(self, n: Merge) -> VectorClock:
        return BINARY_OPERATORS[MERGE_OPERATOR](n.left.accept(self), n.right.accept(self))

    def visit_increment(self, n: Increment) -> VectorClock:
        return n.operand.accept(self).increment(n.pid, n.delta)

    def visit_relation(self, n: Relation) -> bool:
        return predicate_for(n.op)(n.left.accept(self), n.right.accept(self))

    def visit_value_of(self, n: ValueOf) -> int:
        return n.operand.accept(self).total_value()

    def visit_value_at(self, n: ValueAt) -> int:
        return n.operand.accept(self).value_at(n.pid)
