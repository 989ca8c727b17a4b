"""Postfix (Reverse Polish) renderer for expression trees.

Every operator is written after its operands, so the output needs no
parentheses or precedence rules:

    >>> from polish import Binary, Literal, Token, TokenType
    >>> plus = Token(TokenType.PLUS, "+")
    >>> PostfixRenderer().render(Binary(Literal(1), plus, Literal(2)))
    '1 2 +'

Groupings have no postfix spelling of their own and are written as a
trailing ``group`` marker: ``(5)`` renders as ``5 group``.

Thread Safety:
Renderer instances hold only their immutable RenderConfig. All per-render
state lives in a StringBuilder local to each render() call, so one instance
can be shared across threads.

"""

from typing import Never, NoReturn

from polish.config import RenderConfig, get_render_config
from polish.errors import RenderError
from polish.nodes import Binary, Expr, Grouping, Literal, LiteralValue, Unary
from polish.stringbuilder import StringBuilder


def _unsupported(expr: Never) -> NoReturn:
    # Type checkers flag any call site where ``expr`` is not narrowed to Never,
    # i.e. a match over Expr that misses a variant.
    raise RenderError(f"Unsupported expression node: {type(expr).__name__}", expr)


class PostfixRenderer:
    """Render an expression tree in postfix notation."""

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render settings. Defaults to the config active in the
                current context (see ``polish.config``).
        """
        self._config = config if config is not None else get_render_config()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, expr: Expr) -> str:
        """Render an expression to a postfix string.

        The tree is only read, never modified.

        Args:
            expr: Root of the expression tree.

        Returns:
            Space-separated postfix text, e.g. ``"1 2 + 4 3 - *"``.

        Raises:
            RenderError: If the tree contains a node type or literal payload
                outside the supported set.

        """
        sb = StringBuilder()
        self._render_expr(expr, sb)
        return sb.build()

    def _render_expr(self, expr: Expr, sb: StringBuilder) -> None:
        match expr:
            case Literal():
                self._rpn(self.literal_text(expr.value), sb)
            case Grouping():
                self._rpn(self._config.group_marker, sb, expr.expression)
            case Unary():
                self._rpn(expr.operator.lexeme, sb, expr.right)
            case Binary():
                self._rpn(expr.operator.lexeme, sb, expr.left, expr.right)
            case _:
                _unsupported(expr)

    def _rpn(self, label: str, sb: StringBuilder, *children: Expr) -> None:
        """Write each child left to right, then ``label``.

        Each child is followed by one separator. With no children only the
        label is written, which is how literals come out as a single token.
        """
        separator = self._config.separator
        for child in children:
            self._render_expr(child, sb)
            sb.append(separator)
        sb.append(label)

    def literal_text(self, value: LiteralValue) -> str:
        """Canonical text for a literal payload.

        ``None`` is written as the configured nil literal, booleans use Lox
        spelling (``true``/``false``), numbers use Python's default decimal
        form and strings are written as-is without quotes.

        Raises:
            RenderError: For a payload that is not a Lox scalar.

        """
        match value:
            case None:
                return self._config.nil_literal
            case bool():
                return "true" if value else "false"
            case int() | float():
                return str(value)
            case str():
                return value
            case _:
                raise RenderError(
                    f"Unsupported literal value type: {type(value).__name__}", value
                )
