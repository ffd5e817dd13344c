import enum
from dataclasses import dataclass
from typing import Optional, TextIO

from deskcalc import errors
from deskcalc.symbols import SymbolTable
from deskcalc.utils import PrintableEnum

PRINT = "="
QUIT = "x"


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    NAME = enum.auto()
    LET = enum.auto()
    QUIT = enum.auto()
    POW = enum.auto()
    SQRT = enum.auto()
    PRINT = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    COMMA = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PERCENT = enum.auto()
    END = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    value: float = 0.0

    @property
    def is_variable(self) -> bool:
        """A number the lexer substituted for a declared name"""
        return self.type is TokenType.NUMBER and self.lexeme[:1].isalpha()

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"<{self.type}>{self.value}"
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    PRINT: TokenType.PRINT,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
}

KEYWORDS = {
    "let": TokenType.LET,
    "exit": TokenType.QUIT,
    "pow": TokenType.POW,
    "sqrt": TokenType.SQRT,
}


class CharStream:
    """Reads a text file one character at a time, with one character of pushback"""

    def __init__(self, source: TextIO) -> None:
        self.source = source
        self._pending: list[str] = []

    def read(self) -> str:
        """Next character, or empty string at end of input"""
        if self._pending:
            return self._pending.pop()
        return self.source.read(1)

    def unread(self, ch: str) -> None:
        if ch:
            self._pending.append(ch)

    def read_nonspace(self) -> str:
        ch = self.read()
        while ch and ch.isspace():
            ch = self.read()
        return ch


def _is_digit(ch: str) -> bool:
    # str.isdigit() accepts superscripts and other non-ASCII digits
    return ch != "" and ch in "0123456789"


class TokenStream:
    def __init__(self, chars: CharStream, symbols: SymbolTable) -> None:
        self.chars = chars
        self.symbols = symbols
        self.buffer: Optional[Token] = None

    def get(self) -> Token:
        if self.buffer is not None:
            token = self.buffer
            self.buffer = None
            return token

        ch = self.chars.read_nonspace()
        if not ch:
            return Token(type=TokenType.END, lexeme="")
        if ch in SINGLE_CHAR_TOKENS:
            return Token(type=SINGLE_CHAR_TOKENS[ch], lexeme=ch)
        if _is_digit(ch) or ch == ".":
            self.chars.unread(ch)
            return self._read_number()
        if ch.isascii() and ch.isalpha():
            self.chars.unread(ch)
            return self._read_word()
        raise errors.bad_token(ch)

    def putback(self, token: Token) -> None:
        if self.buffer is not None:
            raise errors.pushback_overflow()
        self.buffer = token

    def ignore_until(self, target: str) -> None:
        """Skips input up to and including the next `target` character"""
        buffered = self.buffer
        self.buffer = None
        if buffered is not None and buffered.lexeme == target:
            return

        ch = self.chars.read()
        while ch and ch != target:
            ch = self.chars.read()

    def _read_number(self) -> Token:
        lexeme = self._read_digits()
        ch = self.chars.read()
        if ch == ".":
            lexeme += ch + self._read_digits()
        else:
            self.chars.unread(ch)
        if lexeme == ".":
            raise errors.bad_token(lexeme)

        lexeme += self._read_exponent()
        return Token(type=TokenType.NUMBER, lexeme=lexeme, value=float(lexeme))

    def _read_digits(self) -> str:
        digits = ""
        ch = self.chars.read()
        while _is_digit(ch):
            digits += ch
            ch = self.chars.read()
        self.chars.unread(ch)
        return digits

    def _read_exponent(self) -> str:
        marker = self.chars.read()
        if marker not in ("e", "E"):
            self.chars.unread(marker)
            return ""
        sign = self.chars.read()
        if sign not in ("+", "-"):
            self.chars.unread(sign)
            sign = ""
        digits = self._read_digits()
        if digits:
            return marker + sign + digits
        # not an exponent after all, e.g. `2e` is 2 followed by the constant e
        self.chars.unread(sign)
        self.chars.unread(marker)
        return ""

    def _read_word(self) -> Token:
        word = ""
        ch = self.chars.read()
        while ch.isascii() and ch.isalnum():
            word += ch
            ch = self.chars.read()
        self.chars.unread(ch)

        if word in KEYWORDS:
            return Token(type=KEYWORDS[word], lexeme=word)
        if self.symbols.is_declared(word):
            # declared variables reach the parser as plain numbers
            return Token(type=TokenType.NUMBER, lexeme=word, value=self.symbols.lookup(word))
        return Token(type=TokenType.NAME, lexeme=word)
