"""Save a tree as JSON, load it back, and render both."""

from polish import Binary, Literal, Token, TokenType, from_json, render, to_json

expr = Binary(Literal(1), Token(TokenType.EQUAL_EQUAL, "=="), Literal(True))
payload = to_json(expr, indent=2)
print(payload)

restored = from_json(payload)
assert restored == expr
print(render(restored))  # 1 true ==
