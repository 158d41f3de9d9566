# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Abstract syntax tree for Monkey programs.

Statements and expressions are closed tagged unions: every node carries a
literal ``kind`` discriminator so that a tree can be matched exhaustively and
dumped to (and restored from) JSON without ambiguity.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from monkeylang.model.token import Token

# ###############
# Public Interface
# ###############


class Identifier(BaseModel):
    """A bare name, e.g. ``foobar``."""

    kind: Literal["identifier"] = "identifier"
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(BaseModel):
    """An integer literal together with its parsed signed 64-bit value."""

    kind: Literal["integer"] = "integer"
    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


# An expression node. Grows as prefix and infix handlers are added to the parser.
Expression = Annotated[
    Identifier | IntegerLiteral,
    _Field(discriminator="kind"),
]


class LetStatement(BaseModel):
    """``let <name> = <value>;``"""

    kind: Literal["let"] = "let"
    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        value = str(self.value) if self.value is not None else ""
        return f"{self.token.literal} {self.name} = {value};"


class ReturnStatement(BaseModel):
    """``return <value>;``"""

    kind: Literal["return"] = "return"
    token: Token
    return_value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        value = str(self.return_value) if self.return_value is not None else ""
        return f"{self.token.literal} {value};"


class ExpressionStatement(BaseModel):
    """A statement consisting of a single expression, e.g. ``x + 10;``."""

    kind: Literal["expression"] = "expression"
    token: Token
    expression: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return str(self.expression)


Statement = Annotated[
    LetStatement | ReturnStatement | ExpressionStatement,
    _Field(discriminator="kind"),
]


class Program(BaseModel):
    """Root of the tree: the top-level statements in source order."""

    statements: list[Statement] = _Field(default_factory=list)

    def token_literal(self) -> str:
        """Return the literal of the first statement's token, or '' for an empty program."""
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(statement) for statement in self.statements)
