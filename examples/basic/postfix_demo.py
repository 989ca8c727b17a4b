"""Build a small expression tree by hand and print it in postfix form."""

from polish import Binary, Grouping, Literal, Token, TokenType, Unary, render

minus = Token(TokenType.MINUS, "-")
star = Token(TokenType.STAR, "*")

# -123 * (45.67)
expr = Binary(Unary(minus, Literal(123)), star, Grouping(Literal(45.67)))
print(render(expr))  # 123 - 45.67 group *
