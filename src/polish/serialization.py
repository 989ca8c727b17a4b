"""Expression serialization — JSON round-trip for Polish expression trees.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Feeding trees produced by another front-end to ``python -m polish``
- Saving fixtures for tests and debugging sessions

All output is deterministic (sorted keys).

Example:
    from polish.serialization import to_json, from_json

    json_str = to_json(expr)
    restored = from_json(json_str)
    assert expr == restored

Wire shape:
    {"_type": "Binary",
     "left": {"_type": "Literal", "value": 1},
     "operator": {"_type": "Token", "type": "PLUS", "lexeme": "+",
                  "literal": null, "line": 1},
     "right": {"_type": "Literal", "value": 2}}

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from polish.nodes import Binary, Expr, Grouping, Literal, Node, Unary
from polish.tokens import Token, TokenType
from polish.utils.logger import get_logger

logger = get_logger(__name__)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Literal] | type[Grouping] | type[Unary] | type[Binary]] = {
    "Literal": Literal,
    "Grouping": Grouping,
    "Unary": Unary,
    "Binary": Binary,
}

# Fields holding a child expression / an operator token
_CHILD_FIELDS = {"expression", "left", "right"}
_TOKEN_FIELDS = {"operator"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an expression node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and operator tokens.

    Args:
        node: Any Polish expression node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, Token):
        return {
            "_type": "Token",
            "type": value.type.name,
            "lexeme": value.lexeme,
            "literal": value.literal,
            "line": value.line,
        }
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Expr:
    """Reconstruct a typed expression node from a dict.

    Uses the ``_type`` discriminator to determine the node class. Fields the
    node class does not define are ignored.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed expression node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or not a known node name, a
            field is missing, or an operator token is malformed.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            msg = f"{type_name} is missing field {f.name!r}"
            raise ValueError(msg)
        value = _deserialize_value(data[f.name])
        if f.name in _CHILD_FIELDS and not isinstance(value, Node):
            msg = f"{type_name}.{f.name} must be an expression node"
            raise ValueError(msg)
        if f.name in _TOKEN_FIELDS and not isinstance(value, Token):
            msg = f"{type_name}.{f.name} must be a token"
            raise ValueError(msg)
        kwargs[f.name] = value

    extra = set(data) - set(kwargs) - {"_type"}
    if extra:
        logger.debug("Ignoring unknown %s fields: %s", type_name, sorted(extra))

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if value.get("_type") == "Token":
            return _token_from_dict(value)
        return from_dict(value)
    return value


def _token_from_dict(data: dict[str, Any]) -> Token:
    kind = data.get("type")
    if not isinstance(kind, str) or kind not in TokenType.__members__:
        msg = f"Unknown token type: {kind!r}"
        raise ValueError(msg)
    token_type = TokenType[kind]
    lexeme = data.get("lexeme")
    if not isinstance(lexeme, str):
        msg = f"Token {kind} has no lexeme"
        raise ValueError(msg)
    line = data.get("line", 1)
    if not isinstance(line, int) or isinstance(line, bool):
        msg = f"Token {kind} has a non-integer line: {line!r}"
        raise ValueError(msg)
    return Token(
        type=token_type,
        lexeme=lexeme,
        literal=data.get("literal"),
        line=line,
    )


def to_json(expr: Expr, *, indent: int | None = None) -> str:
    """Serialize an expression tree to a JSON string.

    Args:
        expr: Root of the tree.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string with sorted keys.

    """
    return json.dumps(to_dict(expr), sort_keys=True, indent=indent)


def from_json(data: str) -> Expr:
    """Deserialize an expression tree from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Root expression node.

    Raises:
        ValueError: If the text is not valid JSON or doesn't describe an
            expression tree.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
