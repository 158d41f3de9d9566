# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pratt parser for Monkey programs.

Consumes tokens from a :class:`Lexer` with one token of lookahead and builds a
:class:`Program`. Malformed statements are not fatal: each failure is recorded
as a diagnostic, the statement is dropped, and parsing resumes at the next
statement boundary.
"""

import enum
import logging
from collections.abc import Callable

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
from monkeylang.parser.lexer import Lexer

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

PrefixParseFn = Callable[[], Expression | None]
InfixParseFn = Callable[[Expression], Expression | None]


class Precedence(enum.IntEnum):
    """Binding power of operators, lowest to highest."""

    LOWEST = 1
    EQUALS = 2  # == !=
    LESSGREATER = 3  # < > <= >=
    SUM = 4  # + -
    PRODUCT = 5  # * /
    PREFIX = 6  # -x !x
    CALL = 7  # f(x)


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.LTE: Precedence.LESSGREATER,
    TokenType.GTE: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


class ParseError(Exception):
    """Raised by :func:`parse` when the source produced any diagnostics.

    Attributes:
        diagnostics: Every diagnostic recorded while parsing, in encounter order.
    """

    def __init__(self, diagnostics: list[str]) -> None:
        super().__init__("; ".join(diagnostics))
        self.diagnostics = diagnostics


class Parser:
    """Builds a Program from the tokens of a lexer it exclusively owns."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._errors: list[str] = []
        self._prefix_parse_fns: dict[TokenType, PrefixParseFn] = {}
        self._infix_parse_fns: dict[TokenType, InfixParseFn] = {}

        self.register_prefix(TokenType.IDENT, self._parse_identifier)
        self.register_prefix(TokenType.INT, self._parse_integer_literal)

        # Prime both the current and the lookahead token.
        self._cur_token = self._lexer.next_token()
        self._peek_token = self._lexer.next_token()

    @classmethod
    def from_source(cls, source: str) -> "Parser":
        """Create a parser over a fresh lexer for *source*."""
        return cls(Lexer(source))

    @property
    def errors(self) -> list[str]:
        """Diagnostics recorded so far, in encounter order."""
        return list(self._errors)

    def register_prefix(self, token_type: TokenType, fn: PrefixParseFn) -> None:
        """Register the handler for expressions starting with *token_type*."""
        self._prefix_parse_fns[token_type] = fn

    def register_infix(self, token_type: TokenType, fn: InfixParseFn) -> None:
        """Register the handler for *token_type* in operator position.

        The handler is called with the current token on the operator and
        receives the already parsed left-hand side.
        """
        self._infix_parse_fns[token_type] = fn

    def parse_program(self) -> Program:
        """Parse statements until end of input.

        Never raises. Statements that fail to parse are left out of the
        returned Program and described in :attr:`errors`.
        """
        program = Program()
        while not self.current_token_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                program.statements.append(statement)
            else:
                self._synchronize()
            self.next_token()
        return program

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        """Parse an expression binding tighter than *precedence*.

        Returns None when no prefix handler exists for the current token; a
        diagnostic is recorded in that case.
        """
        prefix = self._prefix_parse_fns.get(self._cur_token.type)
        if prefix is None:
            self._no_prefix_parse_fn_error(self._cur_token.type)
            return None
        left = prefix()

        while (
            left is not None
            and not self.peek_token_is(TokenType.SEMICOLON)
            and precedence < self._peek_precedence()
        ):
            infix = self._infix_parse_fns.get(self._peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def current_token_is(self, token_type: TokenType) -> bool:
        return self._cur_token.is_a(token_type)

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self._peek_token.is_a(token_type)

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the lookahead token is of *token_type*.

        Otherwise record a diagnostic and leave the position unchanged.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self._peek_error(token_type)
        return False

    @property
    def current_token(self) -> Token:
        return self._cur_token

    @property
    def peek_token(self) -> Token:
        return self._peek_token

    def next_token(self) -> None:
        """Advance: the lookahead becomes current and a new lookahead is read."""
        self._cur_token = self._peek_token
        self._peek_token = self._lexer.next_token()

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._peek_token.type, Precedence.LOWEST)

    def current_precedence(self) -> Precedence:
        """Precedence of the current token, for use by infix handlers."""
        return PRECEDENCES.get(self._cur_token.type, Precedence.LOWEST)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _record(self, message: str, token: Token) -> None:
        logger.debug("line %d, column %d: %s", token.line, token.column, message)
        self._errors.append(message)

    def _peek_error(self, token_type: TokenType) -> None:
        self._record(
            f"expected next token to be {token_type.name}, got {self._peek_token.type.name} instead",
            self._peek_token,
        )

    def _no_prefix_parse_fn_error(self, token_type: TokenType) -> None:
        self._record(f"no prefix parse function for {token_type.name} found", self._cur_token)

    def _synchronize(self) -> None:
        """Skip to the ';' closing an abandoned statement (or to end of input)."""
        while not self.current_token_is(TokenType.SEMICOLON) and not self.current_token_is(TokenType.EOF):
            self.next_token()

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> Statement | None:
        if self.current_token_is(TokenType.LET):
            return self._parse_let_statement()
        if self.current_token_is(TokenType.RETURN):
            return self._parse_return_statement()
        return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement | None:
        """Parse: let <identifier> = <expression> ;"""
        token = self._cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None
        name = Identifier(token=self._cur_token, value=self._cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        self._skip_to_statement_end()
        return LetStatement(token=token, name=name, value=value)

    def _parse_return_statement(self) -> ReturnStatement | None:
        """Parse: return [<expression>] ;"""
        token = self._cur_token
        self.next_token()

        if self.current_token_is(TokenType.SEMICOLON):
            return ReturnStatement(token=token)

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        self._skip_to_statement_end()
        return ReturnStatement(token=token, return_value=value)

    def _parse_expression_statement(self) -> ExpressionStatement | None:
        """Parse: <expression> [;]

        An operator left over after the expression (one with a precedence but
        no registered infix handler) is skipped along with the rest of the
        statement, as for let and return values.
        """
        token = self._cur_token
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if self._peek_token.type in PRECEDENCES:
            self._skip_to_statement_end()
        elif self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        return ExpressionStatement(token=token, expression=expression)

    def _skip_to_statement_end(self) -> None:
        """Consume the rest of a statement up to and including its ';'.

        Tokens after the value expression are not turned into a sub-tree.
        """
        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
            return
        self._synchronize()

    # ------------------------------------------------------------------
    # Prefix handlers
    # ------------------------------------------------------------------

    def _parse_identifier(self) -> Expression:
        return Identifier(token=self._cur_token, value=self._cur_token.literal)

    def _parse_integer_literal(self) -> Expression:
        token = self._cur_token
        try:
            value = int(token.literal)
        except ValueError:
            # digit runs beyond the interpreter's int conversion limit
            value = _INT64_MAX + 1
        if not _INT64_MIN <= value <= _INT64_MAX:
            logger.warning(
                "line %d, column %d: integer literal %s does not fit in 64 bits, using 0",
                token.line,
                token.column,
                token.literal,
            )
            value = 0
        return IntegerLiteral(token=token, value=value)


def parse(source: str) -> Program:
    """Parse Monkey source text, failing on any diagnostic.

    Args:
        source: The full program text.

    Returns:
        The parsed Program.

    Raises:
        ParseError: If any statement failed to parse. The exception carries
            every diagnostic, not only the first.
    """
    parser = Parser.from_source(source)
    program = parser.parse_program()
    if parser.errors:
        raise ParseError(parser.errors)
    return program


# ################
# Implementation
# ################

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
