"""Token and TokenType definitions for Lox expression trees.

The scanner of a Lox front-end produces Token objects; the parser embeds
operator tokens in Unary and Binary nodes. Polish only reads them.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Lox token kinds.

    Organized by category:
    - Single-character punctuation and operators
    - One- or two-character comparison operators
    - Literals
    - Keywords

    """

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit as produced by the scanner.

    Attributes:
        type: The token kind (from TokenType enum)
        lexeme: Exact source spelling, e.g. ``"+"`` or ``"<="``
        literal: Scanned literal payload for STRING/NUMBER tokens
        line: Source line number (1-indexed)

    Only ``lexeme`` is read when rendering operators.

    """

    type: TokenType
    lexeme: str
    literal: object = None
    line: int = 1

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"
