import logging
import string
from typing import Iterator

from .token import Token, TokenKind, lookup_identifier

logger = logging.getLogger(__name__)


class Lexer:
    """Turns Monkey source text into tokens, one `next_token` call at a time.

    Parameters
    ----------
    input
        The complete source text. It is never copied or modified.

    Notes
    -----
    Once the end of input is reached the lexer stays there: every further
    call to `next_token` returns another `EOF` token.
    """

    # Stands in for the current character once the input is exhausted.
    NUL = "\0"
    _WHITESPACE = " \t\n\r"
    _LETTERS = string.ascii_letters + "_"

    def __init__(self, input: str) -> None:
        self.input = input
        self.position = 0
        self.read_position = 0
        self.ch = self.NUL

        self.read_char()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input={self.input!r}, "
            f"position={self.position}, "
            f"read_position={self.read_position}, "
            f"ch={self.ch!r})"
        )

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token

            if token.kind == TokenKind.EOF:
                return

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.input)

    def next_token(self) -> Token:
        self.skip_whitespace()

        if self.at_end:
            return Token(TokenKind.EOF, "")

        match self.ch:
            case "=":
                token = self.handle_two_char(TokenKind.ASSIGN, TokenKind.EQ)
            case "!":
                token = self.handle_two_char(TokenKind.BANG, TokenKind.NOT_EQ)
            case "+":
                token = Token(TokenKind.PLUS, self.ch)
            case "-":
                token = Token(TokenKind.MINUS, self.ch)
            case "/":
                token = Token(TokenKind.SLASH, self.ch)
            case "*":
                token = Token(TokenKind.ASTERISK, self.ch)
            case "<":
                token = Token(TokenKind.LT, self.ch)
            case ">":
                token = Token(TokenKind.GT, self.ch)
            case "(":
                token = Token(TokenKind.LPAREN, self.ch)
            case ")":
                token = Token(TokenKind.RPAREN, self.ch)
            case ";":
                token = Token(TokenKind.SEMICOLON, self.ch)
            case ",":
                token = Token(TokenKind.COMMA, self.ch)
            case "{":
                token = Token(TokenKind.LBRACE, self.ch)
            case "}":
                token = Token(TokenKind.RBRACE, self.ch)
            case c if c in self._LETTERS:
                # Identifiers and integers stop on the first character past
                # the run, so they must not advance again below.
                return self.handle_identifier()
            case d if d in string.digits:
                return self.handle_integer()
            case _:
                logger.debug(
                    "illegal character %r at position %d",
                    self.ch,
                    self.position,
                )
                token = Token(TokenKind.ILLEGAL, self.ch)

        self.read_char()
        return token

    def read_char(self) -> None:
        if self.read_position >= len(self.input):
            if self.position < len(self.input):
                logger.debug("reached end of input at %d", len(self.input))

            self.ch = self.NUL
            self.position = len(self.input)
            self.read_position = self.position + 1
        else:
            self.ch = self.input[self.read_position]
            self.position = self.read_position
            self.read_position += 1

    def peek_char(self) -> str:
        if self.read_position >= len(self.input):
            return self.NUL

        return self.input[self.read_position]

    def skip_whitespace(self) -> None:
        while not self.at_end and self.ch in self._WHITESPACE:
            self.read_char()

    def handle_two_char(self, single: TokenKind, double: TokenKind) -> Token:
        if self.peek_char() != "=":
            return Token(single, self.ch)

        start = self.position
        self.read_char()
        return Token(double, self.input[start : self.read_position])

    def handle_identifier(self) -> Token:
        start = self.position

        while not self.at_end and self.ch in self._LETTERS:
            self.read_char()

        literal = self.input[start : self.position]
        return Token(lookup_identifier(literal), literal)

    def handle_integer(self) -> Token:
        start = self.position

        while not self.at_end and self.ch in string.digits:
            self.read_char()

        return Token(TokenKind.INTEGER, self.input[start : self.position])
