"""Tokenizer for Ouroboros source text."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

MAX_TOKEN_LENGTH = 255


class TokenType(IntEnum):
    """Kinds of lexical tokens."""

    IDENTIFIER = 0
    KEYWORD = 1
    NUMBER = 2
    STRING = 3
    BOOL = 4
    OPERATOR = 5
    SYMBOL = 6
    EOF = 7
    UNKNOWN = 8


@dataclass(frozen=True)
class Token:
    """A token with its text and the line and column where it starts."""

    type: TokenType
    text: str
    line: int
    col: int


KEYWORDS = frozenset(
    {
        "let", "const", "var", "function", "return", "if", "else", "while", "for",
        "true", "false", "null",
        "class", "new", "this", "extends", "static",
        "super", "fn",
        "break", "continue",
        "public", "private",
        "import", "print",
        "struct",
        "constructor",
        "int", "long", "float", "double", "bool", "string", "char", "void",
        "any", "array", "object", "map",
        "as", "in", "is",
        "func",
    }
)

_SYMBOLS = frozenset("(){}[];,:.<>?")
_OPERATOR_STARTS = frozenset("+-*/%=&|!<>")
_TWO_CHAR_OPERATORS = frozenset(
    {"++", "+=", "--", "-=", "*=", "/=", "%=", "==", "!=", "<=", "<<", ">=", ">>", "&&", "||"}
)
_STRING_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def is_keyword(text: str) -> bool:
    """Whether the text is a reserved word of the language."""
    return text in KEYWORDS


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in "0123456789"


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_word_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def _report(message: str) -> None:
    print(message, file=sys.stderr)


class _Scanner:
    """Character cursor over the source that tracks line and column."""

    def __init__(self, source: str) -> None:
        end = source.find("\0")
        self.source = source if end < 0 else source[:end]
        self.pos = 0
        self.line = 1
        self.col = 1

    def getc(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def unget(self) -> None:
        if self.pos > 0:
            self.pos -= 1

    def peek(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def skip_whitespace_and_comments(self) -> None:
        while (ch := self.getc()) is not None:
            if ch in " \t\r":
                self.col += 1
            elif ch == "\n":
                self.line += 1
                self.col = 1
            elif ch == "/" and self.peek() == "/":
                self.col += 2
                while (ch := self.getc()) is not None and ch != "\n":
                    self.col += 1
                if ch == "\n":
                    self.line += 1
                    self.col = 1
            elif ch == "/" and self.peek() == "*":
                self.getc()
                self.col += 2
                self._skip_block_comment()
            else:
                self.unget()
                break

    def _skip_block_comment(self) -> None:
        while (ch := self.getc()) is not None:
            if ch == "*":
                if self.peek() == "/":
                    self.getc()
                    self.col += 2
                    return
                self.col += 1
            elif ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def next_token(self) -> Token:
        self.skip_whitespace_and_comments()
        line, col = self.line, self.col
        ch = self.getc()
        if ch is None:
            return Token(TokenType.EOF, "", line, col)

        if _is_alpha(ch) or ch == "_":
            return self._word(ch, line, col)
        if _is_digit(ch) or (ch == "." and _is_digit(self.peek())):
            return self._number(ch, line, col)
        if ch == '"':
            return self._string(line, col)
        if ch == "'":
            return self._char(line, col)
        if ch in _OPERATOR_STARTS:
            return self._operator(ch, line, col)
        self.col += 1
        if ch in _SYMBOLS:
            return Token(TokenType.SYMBOL, ch, line, col)
        _report(f"Lexer Warning (L{line}:{col}): Unknown character '{ch}' (ASCII {ord(ch)}).")
        return Token(TokenType.UNKNOWN, ch, line, col)

    def _word(self, first: str, line: int, col: int) -> Token:
        chars = [first]
        self.col += 1
        while (ch := self.getc()) is not None and _is_word_char(ch):
            if len(chars) < MAX_TOKEN_LENGTH:
                chars.append(ch)
            self.col += 1
        if ch is not None:
            self.unget()
        text = "".join(chars)
        if text in ("true", "false"):
            kind = TokenType.BOOL
        elif is_keyword(text):
            kind = TokenType.KEYWORD
        else:
            kind = TokenType.IDENTIFIER
        return Token(kind, text, line, col)

    def _number(self, first: str, line: int, col: int) -> Token:
        if first == ".":
            chars = ["0", "."]
            has_decimal = True
        else:
            chars = [first]
            has_decimal = False
        self.col += 1

        while (ch := self.getc()) is not None:
            if _is_digit(ch):
                if len(chars) < MAX_TOKEN_LENGTH:
                    chars.append(ch)
                self.col += 1
            elif ch == "." and not has_decimal:
                if len(chars) < MAX_TOKEN_LENGTH:
                    chars.append(ch)
                has_decimal = True
                self.col += 1
            elif ch in "eE" and _is_digit(chars[-1]):
                if len(chars) >= MAX_TOKEN_LENGTH - 1:
                    break
                chars.append(ch)
                self.col += 1
                if self.peek() in ("+", "-"):
                    chars.append(self.getc())
                    self.col += 1
                if not _is_digit(self.peek()):
                    _report(
                        f"Lexer Error (L{line}:{col + len(chars)}): Malformed exponent in number."
                    )
                    break
            else:
                self.unget()
                break
        return Token(TokenType.NUMBER, "".join(chars), line, col)

    def _string(self, line: int, col: int) -> Token:
        chars: list[str] = []
        self.col += 1
        while (ch := self.getc()) is not None:
            self.col += 1
            if ch == '"':
                break
            if ch == "\\":
                escaped = self.getc()
                self.col += 1
                if escaped is None:
                    break
                chars.append(_STRING_ESCAPES.get(escaped, escaped))
            elif len(chars) < MAX_TOKEN_LENGTH:
                chars.append(ch)
            if len(chars) >= MAX_TOKEN_LENGTH:
                break
        return Token(TokenType.STRING, "".join(chars), line, col)

    def _char(self, line: int, col: int) -> Token:
        self.col += 1
        ch = self.getc()
        if ch is None:
            _report(f"Lexer Error (L{line}:{col}): Unterminated character literal.")
            return Token(TokenType.UNKNOWN, "", line, col)
        self.col += 1
        if ch == "\\":
            escaped = self.getc()
            self.col += 1
            if escaped is None:
                _report(f"Lexer Error (L{line}:{col}): Unterminated escape in character literal.")
                return Token(TokenType.UNKNOWN, "", line, col)
            text = _STRING_ESCAPES.get(escaped, escaped)
        else:
            text = ch
        if self.getc() != "'":
            _report(
                f"Lexer Error (L{line}:{col}): Expected closing single quote for character literal."
            )
            return Token(TokenType.UNKNOWN, text, line, col)
        self.col += 1
        return Token(TokenType.STRING, text, line, col)

    def _operator(self, first: str, line: int, col: int) -> Token:
        text = first
        self.col += 1
        following = self.peek()
        after = None
        if following is not None:
            self.getc()
            after = self.peek()
            self.unget()

        if first == ">" and following == ">" and after == ">":
            text += self.getc() + self.getc()
            self.col += 2
        elif following is not None and first + following in _TWO_CHAR_OPERATORS:
            text += self.getc()
            self.col += 1
        return Token(TokenType.OPERATOR, text, line, col)


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of the source, ending with a single EOF token."""
    scanner = _Scanner(source)
    while True:
        token = scanner.next_token()
        yield token
        if token.type is TokenType.EOF:
            return


def lex(source: str) -> list[Token]:
    """Return all tokens of the source; the last one is always EOF."""
    return list(tokenize(source))