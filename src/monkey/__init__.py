from .lexer import Lexer
from .token import KEYWORDS, Token, TokenKind, lookup_identifier

__all__ = (
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "lookup_identifier",
    "tokenize",
)


def tokenize(source: str) -> list[Token]:
    """Scan Monkey `source` into a list of tokens.

    Parameters
    ----------
    source
        Text to scan.

    Returns
    -------
    list
        Every token in order, ending with a single `TokenKind.EOF` token.

    Notes
    -----
    Characters the language does not know about do not raise; they come back
    as `TokenKind.ILLEGAL` tokens for the caller to report.
    """
    return list(Lexer(input=source))
