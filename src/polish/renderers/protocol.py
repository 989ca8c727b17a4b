"""ExprRenderer protocol — stable interface for expression renderers.

Any renderer that implements ``render(expr) -> str`` conforms to this
protocol. ``PostfixRenderer`` is the built-in implementation.

Example:
    from polish.renderers.protocol import ExprRenderer

    def describe(renderer: ExprRenderer, expr: Expr) -> str:
        return f"expr: {renderer.render(expr)}"

"""

from typing import Protocol

from polish.nodes import Expr


class ExprRenderer(Protocol):
    """Protocol for expression renderers."""

    def render(self, expr: Expr) -> str:
        """Render an expression tree to a string.

        Args:
            expr: Root of the expression tree.

        Returns:
            Rendered string output.

        """
        ...
