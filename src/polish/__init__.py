"""
Polish — Reverse Polish printer for Lox expression trees

Renders an immutable expression tree (literals, groupings, unary and binary
operators) as a single line of postfix text. Useful for diagnostics,
debugging, and showing how tree traversal works.

Quick Start:
    >>> from polish import Binary, Literal, Token, TokenType, render
    >>> expr = Binary(Literal(1), Token(TokenType.PLUS, "+"), Literal(2))
    >>> render(expr)
    '1 2 +'

Command line:
    python -m polish              # render the built-in sample tree
    python -m polish tree.json    # render a serialized tree
"""

from polish.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from polish.errors import PolishError, RenderError
from polish.nodes import Binary, Expr, Grouping, Literal, LiteralValue, Node, Unary
from polish.renderers.postfix import PostfixRenderer
from polish.renderers.protocol import ExprRenderer
from polish.serialization import from_dict, from_json, to_dict, to_json
from polish.tokens import Token, TokenType

__version__ = "0.1.0"


def render(expr: Expr, *, config: RenderConfig | None = None) -> str:
    """Render an expression tree in postfix notation.

    Args:
        expr: Root of the expression tree
        config: Render settings (uses the context config if None)

    Returns:
        Postfix string

    Example:
        >>> render(Grouping(Literal(5)))
        '5 group'
    """
    return PostfixRenderer(config).render(expr)


__all__ = [
    "Binary",
    "Expr",
    "ExprRenderer",
    "Grouping",
    "Literal",
    "LiteralValue",
    "Node",
    "PolishError",
    "PostfixRenderer",
    "RenderConfig",
    "RenderError",
    "Token",
    "TokenType",
    "__version__",
    "from_dict",
    "from_json",
    "get_render_config",
    "render",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    "to_dict",
    "to_json",
]
