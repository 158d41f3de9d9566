# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model shared by the lexer, the parser, and the syntax tree."""

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Monkey lexer."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "fn"
    LET = "let"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    ELSE = "else"
    RETURN = "return"

    # Operators
    EQ = "=="
    NOT_EQ = "!="
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Equality compares the kind and the literal text only, so tokens taken from
    different positions of a source compare equal when they read the same.

    Attributes:
        type: The kind of token.
        literal: The exact source text matched (empty for EOF).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    literal: str
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def is_a(self, kind: TokenType) -> bool:
        """Return True if this token is of the given kind, whatever its literal."""
        return self.type is kind
