# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree model for Monkey programs."""

from monkeylang.model.ast import (
    Expression,
    ExpressionStatement,
    Identifier,
    IntegerLiteral,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from monkeylang.model.token import Token, TokenType

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    # Expressions
    "Expression",
    "Identifier",
    "IntegerLiteral",
    # Statements
    "Statement",
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    # Root
    "Program",
]
