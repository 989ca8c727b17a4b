"""Command-line entry point: ``python -m polish [tree.json]``.

Without arguments, renders a sample tree for ``(1 + 2) * (4 - 3)``.
With a path (or ``-`` for stdin), renders a tree saved with
``polish.serialization.to_json``.
"""

import argparse
import logging
import sys
from pathlib import Path

from polish.config import RenderConfig
from polish.errors import RenderError
from polish.nodes import Binary, Expr, Literal
from polish.renderers.postfix import PostfixRenderer
from polish.serialization import from_json
from polish.tokens import Token, TokenType
from polish.utils.logger import get_logger

logger = get_logger(__name__)


def sample_expression() -> Expr:
    """Sample tree for ``(1 + 2) * (4 - 3)``."""
    return Binary(
        Binary(Literal(1), Token(TokenType.PLUS, "+"), Literal(2)),
        Token(TokenType.STAR, "*"),
        Binary(Literal(4), Token(TokenType.MINUS, "-"), Literal(3)),
    )


def _load(path: str) -> Expr:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(text), path)
    return from_json(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polish",
        description="Print a Lox expression tree in Reverse Polish notation",
    )
    parser.add_argument(
        "tree",
        nargs="?",
        help="JSON file holding a serialized expression tree ('-' for stdin); "
        "renders a built-in sample when omitted",
    )
    parser.add_argument("--separator", help="text between output tokens")
    parser.add_argument("--group-marker", help="token written after a grouping")
    parser.add_argument("--nil", dest="nil_literal", help="text for nil literals")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RenderConfig.from_dict(
        {
            key: value
            for key, value in vars(args).items()
            if key in ("separator", "group_marker", "nil_literal") and value is not None
        }
    )

    try:
        expr = sample_expression() if args.tree is None else _load(args.tree)
        output = PostfixRenderer(config).render(expr)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.tree, e)
        return 1
    except (ValueError, RenderError) as e:
        logger.error("Invalid expression tree: %s", e)
        return 1
    except RecursionError:
        logger.error("Expression tree too deep (recursion limit %d)", sys.getrecursionlimit())
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
