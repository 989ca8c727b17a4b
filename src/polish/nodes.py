"""Typed expression nodes for Lox expression trees.

All nodes are frozen dataclasses with slots for:
- Immutability: a rendered tree is never modified, safe to share across threads
- Value equality: structurally identical trees compare equal
- Pattern matching: renderers dispatch with ``match`` over the closed set

Node Hierarchy:
Node (base)
├── Literal
├── Grouping
├── Unary
└── Binary

The set is closed. Code that walks an ``Expr`` should match all four variants
and narrow the fallthrough arm to ``Never`` so a type checker catches a
missing case.

"""

from __future__ import annotations

from dataclasses import dataclass

from polish.tokens import Token

# Scalar payloads a Lox scanner can place in a literal; None is Lox ``nil``.
type LiteralValue = float | int | str | bool | None


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all expression nodes."""


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """A literal value.

    Lox: 1, 2.5, "text", true, nil

    """

    value: LiteralValue


@dataclass(frozen=True, slots=True)
class Grouping(Node):
    """An explicitly parenthesized sub-expression.

    Lox: (expression)

    """

    expression: Expr


@dataclass(frozen=True, slots=True)
class Unary(Node):
    """Prefix operator applied to one operand.

    Lox: -right, !right

    """

    operator: Token
    right: Expr


@dataclass(frozen=True, slots=True)
class Binary(Node):
    """Infix operator applied to two operands.

    Lox: left + right, left == right, ...

    """

    left: Expr
    operator: Token
    right: Expr


type Expr = Literal | Grouping | Unary | Binary

# For isinstance checks; ``Expr`` itself is a lazy type alias.
EXPR_TYPES: tuple[type[Node], ...] = (Literal, Grouping, Unary, Binary)
