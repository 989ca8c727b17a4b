"""Tests for the postfix renderer."""

import copy

import pytest

from polish import render
from polish.config import RenderConfig
from polish.nodes import Binary, Grouping, Literal, Unary
from polish.renderers import ExprRenderer, PostfixRenderer
from polish.tokens import Token, TokenType

PLUS = Token(TokenType.PLUS, "+")
MINUS = Token(TokenType.MINUS, "-")
STAR = Token(TokenType.STAR, "*")
BANG = Token(TokenType.BANG, "!")
LESS_EQUAL = Token(TokenType.LESS_EQUAL, "<=")


def _sample() -> Binary:
    return Binary(
        Binary(Literal(1), PLUS, Literal(2)),
        STAR,
        Binary(Literal(4), MINUS, Literal(3)),
    )


class TestScenarios:
    """Canonical examples."""

    def test_integer_literal(self) -> None:
        assert render(Literal(1)) == "1"

    def test_binary(self) -> None:
        assert render(Binary(Literal(1), PLUS, Literal(2))) == "1 2 +"

    def test_grouping(self) -> None:
        assert render(Grouping(Literal(5))) == "5 group"

    def test_unary(self) -> None:
        assert render(Unary(MINUS, Literal(3))) == "3 -"

    def test_nested_binary(self) -> None:
        assert render(_sample()) == "1 2 + 4 3 - *"

    def test_nil_literal(self) -> None:
        assert render(Literal(None)) == "nil"


class TestLiterals:
    """Canonical text for each literal kind."""

    def test_float(self) -> None:
        assert render(Literal(2.5)) == "2.5"

    def test_whole_float_keeps_decimal(self) -> None:
        assert render(Literal(1.0)) == "1.0"

    def test_negative_number(self) -> None:
        assert render(Literal(-7)) == "-7"

    def test_string_is_unquoted(self) -> None:
        assert render(Literal("hello")) == "hello"

    def test_string_with_spaces_is_not_escaped(self) -> None:
        assert render(Literal('a "b" c')) == 'a "b" c'

    def test_true(self) -> None:
        assert render(Literal(True)) == "true"

    def test_false(self) -> None:
        assert render(Literal(False)) == "false"

    def test_zero_is_not_false(self) -> None:
        assert render(Literal(0)) == "0"


class TestComposition:
    """Operands come first, operators last, single spaces between."""

    def test_binary_operand_order(self) -> None:
        expr = Binary(Literal("a"), LESS_EQUAL, Literal("b"))
        assert render(expr) == "a b <="

    def test_unary_of_grouping(self) -> None:
        expr = Unary(BANG, Grouping(Literal(True)))
        assert render(expr) == "true group !"

    def test_grouping_of_binary(self) -> None:
        expr = Grouping(Binary(Literal(1), PLUS, Literal(2)))
        assert render(expr) == "1 2 + group"

    def test_nested_groupings(self) -> None:
        assert render(Grouping(Grouping(Literal(None)))) == "nil group group"

    def test_double_negation(self) -> None:
        assert render(Unary(MINUS, Unary(MINUS, Literal(4)))) == "4 - -"

    def test_left_deep_chain(self) -> None:
        expr = Binary(Binary(Binary(Literal(1), PLUS, Literal(2)), PLUS, Literal(3)), PLUS, Literal(4))
        assert render(expr) == "1 2 + 3 + 4 +"

    def test_right_deep_chain(self) -> None:
        expr = Binary(Literal(1), PLUS, Binary(Literal(2), PLUS, Binary(Literal(3), PLUS, Literal(4))))
        assert render(expr) == "1 2 3 4 + + +"

    def test_only_lexeme_is_read(self) -> None:
        # Kind and lexeme disagree; output follows the lexeme.
        odd = Token(TokenType.STAR, "-", line=9)
        assert render(Binary(Literal(4), odd, Literal(3))) == "4 3 -"

    def test_deep_tree(self) -> None:
        expr = Literal(0)
        for _ in range(200):
            expr = Unary(MINUS, expr)
        assert render(expr) == "0" + " -" * 200


class TestPurity:
    """Rendering reads the tree and nothing else."""

    def test_tree_unchanged(self) -> None:
        expr = Binary(Grouping(Unary(MINUS, Literal(1.5))), STAR, _sample())
        before = copy.deepcopy(expr)
        render(expr)
        assert expr == before

    def test_deterministic_for_equal_trees(self) -> None:
        assert render(_sample()) == render(_sample())

    def test_renderer_reusable(self) -> None:
        renderer = PostfixRenderer()
        assert renderer.render(Literal(1)) == "1"
        assert renderer.render(_sample()) == "1 2 + 4 3 - *"
        assert renderer.render(Literal(1)) == "1"


class TestRendererConfig:
    """Explicit configuration on the renderer."""

    def test_custom_separator(self) -> None:
        renderer = PostfixRenderer(RenderConfig(separator=","))
        assert renderer.render(_sample()) == "1,2,+,4,3,-,*"

    def test_custom_group_marker(self) -> None:
        renderer = PostfixRenderer(RenderConfig(group_marker="()"))
        assert renderer.render(Grouping(Literal(5))) == "5 ()"

    def test_custom_nil(self) -> None:
        renderer = PostfixRenderer(RenderConfig(nil_literal="null"))
        assert renderer.render(Literal(None)) == "null"

    def test_render_function_accepts_config(self) -> None:
        assert render(Literal(None), config=RenderConfig(nil_literal="NIL")) == "NIL"

    def test_config_property(self) -> None:
        config = RenderConfig(separator="|")
        assert PostfixRenderer(config).config is config


class TestProtocol:
    def test_postfix_renderer_conforms(self) -> None:
        def use(renderer: ExprRenderer) -> str:
            return renderer.render(Literal(1))

        assert use(PostfixRenderer()) == "1"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, "nil"), (True, "true"), (False, "false"), (3, "3"), (0.25, "0.25"), ("x", "x")],
)
def test_literal_text(value: object, expected: str) -> None:
    assert PostfixRenderer().literal_text(value) == expected  # type: ignore[arg-type]
