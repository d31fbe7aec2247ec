import dataclasses
import enum
import types


class TokenKind(enum.IntEnum):
    ILLEGAL = enum.auto()
    EOF = enum.auto()

    IDENTIFIER = enum.auto()
    INTEGER = enum.auto()

    # Operators
    ASSIGN = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    BANG = enum.auto()
    ASTERISK = enum.auto()
    SLASH = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    EQ = enum.auto()
    NOT_EQ = enum.auto()

    # Delimiters
    COMMA = enum.auto()
    SEMICOLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()

    # Keywords
    FUNCTION = enum.auto()
    LET = enum.auto()
    TRUE = enum.auto()
    FALSE = enum.auto()
    IF = enum.auto()
    ELSE = enum.auto()
    RETURN = enum.auto()


@dataclasses.dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.literal!r})"


KEYWORDS = types.MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
    }
)


def lookup_identifier(text: str, /) -> TokenKind:
    """Return the keyword kind for `text`, or `IDENTIFIER` if it is not one."""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)
