# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Monkey source text.

Converts raw source text into a lazy sequence of tokens for subsequent parsing.
"""

import string
from collections.abc import Callable, Iterator

from monkeylang.model.token import Token, TokenType

# ###############
# Public Interface
# ###############


class Lexer:
    """Lazy, single-pass scanner over an in-memory source string.

    Each call to :meth:`next_token` yields the next token. Once the input is
    exhausted every further call returns an EOF token. Iterating a lexer yields
    the remaining tokens up to and including the first EOF.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._read_position = 0
        self._ch = _NUL
        self._line = 1
        self._column = 0
        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()
        line = self._line
        col = self._column
        ch = self._ch

        if ch == _NUL:
            return Token(TokenType.EOF, "", line, col)

        if ch in _TWO_CHAR_TOKENS and self._peek_char() == "=":
            self._read_char()
            self._read_char()
            literal = ch + "="
            return Token(_TWO_CHAR_TOKENS[ch], literal, line, col)

        if ch in _SINGLE_CHAR_TOKENS:
            self._read_char()
            return Token(_SINGLE_CHAR_TOKENS[ch], ch, line, col)

        if _is_letter(ch):
            ident = self._read_while(_is_letter)
            return Token(_KEYWORDS.get(ident, TokenType.IDENT), ident, line, col)

        if _is_digit(ch):
            return Token(TokenType.INT, self._read_while(_is_digit), line, col)

        self._read_char()
        return Token(TokenType.ILLEGAL, ch, line, col)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        """Move to the next character, or to the NUL sentinel past the end."""
        if self._ch == "\n":
            self._line += 1
            self._column = 0
        self._column += 1
        if self._read_position >= len(self._source):
            self._ch = _NUL
            self._position = len(self._source)
            return
        self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        """Return the character after the current one without consuming it."""
        if self._read_position >= len(self._source):
            return _NUL
        return self._source[self._read_position]

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume a maximal run of characters satisfying *predicate* and return it."""
        start = self._position
        while self._ch != _NUL and predicate(self._ch):
            self._read_char()
        return self._source[start : self._position]

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()


def tokenize(source: str) -> list[Token]:
    """Tokenize Monkey source text.

    Args:
        source: The full program text.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return list(Lexer(source))


# ################
# Implementation
# ################

# Sentinel for "no character": before the first read and past the end of input.
_NUL = ""

_WHITESPACE = frozenset(" \t\n\r")

_KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
}

# Operators that combine with a following '=' into a single token.
_TWO_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.EQ,
    "!": TokenType.NOT_EQ,
    "<": TokenType.LTE,
    ">": TokenType.GTE,
}


def _is_letter(ch: str) -> bool:
    return ch in string.ascii_letters


def _is_digit(ch: str) -> bool:
    return ch in string.digits
