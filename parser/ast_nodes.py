# parser/ast_nodes.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Abstract Syntax Tree node classes for clock query representation

"""AST node classes for representing parsed clock queries.

Node Types:
    ClockLiteral: A literal clock such as {A:1, B:2}
    Merge: Pointwise maximum of two clock expressions (||)
    Increment: increment(expr, id, delta)
    Relation: One of the boundary predicates applied to two clock expressions
    ValueOf, ValueAt: Scalar accessors

All nodes support the visitor design pattern for evaluation, and render
back to query syntax through __str__.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple

from model.vector_clock import render_id


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_clock(self, n: ClockLiteral): ...

    def visit_merge(self, n: Merge): ...

    def visit_increment(self, n: Increment): ...

    def visit_relation(self, n: Relation): ...

    def visit_value_of(self, n: ValueOf): ...

    def visit_value_at(self, n: ValueAt): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all query AST nodes."""

    def accept(self, v: Visitor):
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ClockLiteral(Expr):
    """Literal clock in source order.

    Attributes:
        pairs: (id, counter) pairs as written
    """

    pairs: Tuple[Tuple[str, int], ...]

    def accept(self, v: Visitor):
        return v.visit_clock(self)

    def __str__(self) -> str:
        items = ", ".join(f"{render_id(k)}:{ts}" for k, ts in self.pairs)
        return f"{{{items}}}"


@dataclass(frozen=True, slots=True)
class Merge(Expr):
    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_merge(self)

    def __str__(self) -> str:
        return f"({self.left} || {self.right})"


@dataclass(frozen=True, slots=True)
class Increment(Expr):
    operand: Expr
    pid: str
    delta: int

    def accept(self, v: Visitor):
        return v.visit_increment(self)

    def __str__(self) -> str:
        return f"increment({self.operand}, {render_id(self.pid)}, {self.delta})"


@dataclass(frozen=True, slots=True)
class Relation(Expr):
    """Boundary predicate between two clock expressions.

    Attributes:
        op: Operator symbol (~, =, @>, <@)
        left: Left-hand clock expression
        right: Right-hand clock expression
    """

    op: str
    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_relation(self)

    def __str__(self) -> str:
        return f"{self.left} {self.op} {self.right}"


@dataclass(frozen=True, slots=True)
class ValueOf(Expr):
    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_value_of(self)

    def __str__(self) -> str:
        return f"valueof({self.operand})"


@dataclass(frozen=True, slots=True)
class ValueAt(Expr):
    operand: Expr
    pid: str

    def accept(self, v: Visitor):
        return v.visit_value_at(self)

    def __str__(self) -> str:
        return f"valueat({self.operand}, {render_id(self.pid)})"
