# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and Pratt parser for Monkey source text."""

from monkeylang.model.token import Token, TokenType
from monkeylang.parser.lexer import Lexer, tokenize
from monkeylang.parser.parser import ParseError, Parser, Precedence, parse

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "Precedence",
    "ParseError",
    "parse",
]
