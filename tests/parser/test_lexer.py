# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Monkey lexical scanner."""

import pytest

from monkeylang.parser.lexer import Lexer, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source)
    assert result[-1].type == TokenType.EOF
    return result[:-1]


def _types(source: str) -> list[TokenType]:
    """Return the token types for all tokens except EOF."""
    return [tok.type for tok in _tokens_no_eof(source)]


def _literals(source: str) -> list[str]:
    """Return the token literals for all tokens except EOF."""
    return [tok.literal for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].literal == ""

    def test_whitespace_only_produces_eof(self) -> None:
        tokens = tokenize("  \t\r\n  ")
        assert [tok.type for tok in tokens] == [TokenType.EOF]

    def test_next_token_after_end_keeps_returning_eof(self) -> None:
        lexer = Lexer("x")
        assert lexer.next_token().type == TokenType.IDENT
        for _ in range(5):
            assert lexer.next_token().type == TokenType.EOF

    def test_iteration_stops_after_first_eof(self) -> None:
        tokens = list(Lexer("let"))
        assert [tok.type for tok in tokens] == [TokenType.LET, TokenType.EOF]

    def test_tokenize_ends_with_single_eof(self) -> None:
        tokens = tokenize("let x = 5;")
        assert [tok.type for tok in tokens].count(TokenType.EOF) == 1


# ###############
# Keywords
# ###############


class TestKeywords:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("fn", TokenType.FUNCTION),
            ("let", TokenType.LET),
            ("true", TokenType.TRUE),
            ("false", TokenType.FALSE),
            ("if", TokenType.IF),
            ("else", TokenType.ELSE),
            ("return", TokenType.RETURN),
        ],
    )
    def test_keyword_recognized(self, source: str, expected_type: TokenType) -> None:
        tokens = _tokens_no_eof(source)
        assert len(tokens) == 1
        assert tokens[0].type == expected_type
        assert tokens[0].literal == source

    def test_keywords_case_sensitive(self) -> None:
        assert _types("Let RETURN Fn") == [TokenType.IDENT, TokenType.IDENT, TokenType.IDENT]

    def test_keyword_prefix_and_suffix_are_identifiers(self) -> None:
        assert _types("le lets returned") == [TokenType.IDENT, TokenType.IDENT, TokenType.IDENT]


# ###############
# Identifiers
# ###############


class TestIdentifiers:
    def test_identifier_carries_its_text(self) -> None:
        tokens = _tokens_no_eof("foobar")
        assert tokens == [Token(TokenType.IDENT, "foobar")]

    def test_identifier_is_letters_only(self) -> None:
        # digits and underscores end an identifier
        assert _types("abc1") == [TokenType.IDENT, TokenType.INT]
        assert _types("a_b") == [TokenType.IDENT, TokenType.ILLEGAL, TokenType.IDENT]
        assert _literals("a_b") == ["a", "_", "b"]

    def test_non_ascii_letter_is_illegal(self) -> None:
        assert _types("é") == [TokenType.ILLEGAL]

    def test_identifier_at_end_of_input(self) -> None:
        assert _literals("let add") == ["let", "add"]


# ###############
# Integer Literals
# ###############


class TestIntegers:
    def test_digit_run_is_one_token(self) -> None:
        tokens = _tokens_no_eof("838383")
        assert tokens == [Token(TokenType.INT, "838383")]

    def test_leading_zeros_are_kept_in_literal(self) -> None:
        assert _literals("007") == ["007"]

    def test_minus_is_separate_token(self) -> None:
        assert _types("-5") == [TokenType.MINUS, TokenType.INT]

    def test_integer_followed_by_identifier(self) -> None:
        assert _types("5five") == [TokenType.INT, TokenType.IDENT]


# ###############
# Operators and Delimiters
# ###############


class TestOperators:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("(", TokenType.LPAREN),
            (")", TokenType.RPAREN),
            ("{", TokenType.LBRACE),
            ("}", TokenType.RBRACE),
            (",", TokenType.COMMA),
            (";", TokenType.SEMICOLON),
            ("+", TokenType.PLUS),
            ("-", TokenType.MINUS),
            ("*", TokenType.ASTERISK),
            ("/", TokenType.SLASH),
            ("=", TokenType.ASSIGN),
            ("!", TokenType.BANG),
            ("<", TokenType.LT),
            (">", TokenType.GT),
        ],
    )
    def test_single_char_token(self, source: str, expected_type: TokenType) -> None:
        assert _tokens_no_eof(source) == [Token(expected_type, source)]

    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("==", TokenType.EQ),
            ("!=", TokenType.NOT_EQ),
            ("<=", TokenType.LTE),
            (">=", TokenType.GTE),
        ],
    )
    def test_two_char_token(self, source: str, expected_type: TokenType) -> None:
        assert _tokens_no_eof(source) == [Token(expected_type, source)]

    @pytest.mark.parametrize(
        ("source", "expected_types"),
        [
            ("=+", [TokenType.ASSIGN, TokenType.PLUS]),
            ("!-", [TokenType.BANG, TokenType.MINUS]),
            ("<5", [TokenType.LT, TokenType.INT]),
            ("> x", [TokenType.GT, TokenType.IDENT]),
            ("= =", [TokenType.ASSIGN, TokenType.ASSIGN]),
        ],
    )
    def test_single_char_form_without_following_equals(
        self, source: str, expected_types: list[TokenType]
    ) -> None:
        assert _types(source) == expected_types

    def test_triple_equals_is_eq_then_assign(self) -> None:
        assert _types("===") == [TokenType.EQ, TokenType.ASSIGN]

    def test_two_char_token_at_end_of_input(self) -> None:
        assert _types("x >=") == [TokenType.IDENT, TokenType.GTE]

    def test_operator_sequence(self) -> None:
        assert _literals("==+{}();!=") == ["==", "+", "{", "}", "(", ")", ";", "!="]


# ###############
# Illegal Characters
# ###############


class TestIllegal:
    @pytest.mark.parametrize("source", ["@", "#", "$", "[", '"', "\0"])
    def test_unknown_character_is_illegal(self, source: str) -> None:
        assert _tokens_no_eof(source) == [Token(TokenType.ILLEGAL, source)]

    def test_scanning_continues_after_illegal(self) -> None:
        assert _types("x @ y") == [TokenType.IDENT, TokenType.ILLEGAL, TokenType.IDENT]


# ###############
# Source Locations
# ###############


class TestSourceLocations:
    def test_first_token_at_line_1_column_1(self) -> None:
        token = tokenize("let")[0]
        assert (token.line, token.column) == (1, 1)

    def test_columns_advance_on_same_line(self) -> None:
        tokens = tokenize("let x = 5;")
        assert [tok.column for tok in tokens] == [1, 5, 7, 9, 10, 11]

    def test_newline_starts_next_line(self) -> None:
        tokens = _tokens_no_eof("let\n  x")
        assert (tokens[1].line, tokens[1].column) == (2, 3)

    def test_locations_do_not_affect_equality(self) -> None:
        assert Token(TokenType.IDENT, "x", 1, 1) == Token(TokenType.IDENT, "x", 7, 3)

    def test_different_literals_are_not_equal(self) -> None:
        assert Token(TokenType.IDENT, "x") != Token(TokenType.IDENT, "y")

    def test_is_a_ignores_literal(self) -> None:
        assert Token(TokenType.IDENT, "anything").is_a(TokenType.IDENT)
        assert not Token(TokenType.INT, "5").is_a(TokenType.IDENT)


# ###############
# Full Example
# ###############


_PROGRAM = """
let five = 5;
let ten = 10;
let add = fn(x, y) {
    x + y;
};
let result = add(five, ten);
!-/*5;
5 < 10 > 5;
if (5 < 10) {
    return true;
} else {
    return false;
}

10 == 10;
10 != 9;

10>=4
5<=5
"""


class TestFullExample:
    def test_token_stream(self) -> None:
        expected = [
            (TokenType.LET, "let"),
            (TokenType.IDENT, "five"),
            (TokenType.ASSIGN, "="),
            (TokenType.INT, "5"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.LET, "let"),
            (TokenType.IDENT, "ten"),
            (TokenType.ASSIGN, "="),
            (TokenType.INT, "10"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.LET, "let"),
            (TokenType.IDENT, "add"),
            (TokenType.ASSIGN, "="),
            (TokenType.FUNCTION, "fn"),
            (TokenType.LPAREN, "("),
            (TokenType.IDENT, "x"),
            (TokenType.COMMA, ","),
            (TokenType.IDENT, "y"),
            (TokenType.RPAREN, ")"),
            (TokenType.LBRACE, "{"),
            (TokenType.IDENT, "x"),
            (TokenType.PLUS, "+"),
            (TokenType.IDENT, "y"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.RBRACE, "}"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.LET, "let"),
            (TokenType.IDENT, "result"),
            (TokenType.ASSIGN, "="),
            (TokenType.IDENT, "add"),
            (TokenType.LPAREN, "("),
            (TokenType.IDENT, "five"),
            (TokenType.COMMA, ","),
            (TokenType.IDENT, "ten"),
            (TokenType.RPAREN, ")"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.BANG, "!"),
            (TokenType.MINUS, "-"),
            (TokenType.SLASH, "/"),
            (TokenType.ASTERISK, "*"),
            (TokenType.INT, "5"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.INT, "5"),
            (TokenType.LT, "<"),
            (TokenType.INT, "10"),
            (TokenType.GT, ">"),
            (TokenType.INT, "5"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.IF, "if"),
            (TokenType.LPAREN, "("),
            (TokenType.INT, "5"),
            (TokenType.LT, "<"),
            (TokenType.INT, "10"),
            (TokenType.RPAREN, ")"),
            (TokenType.LBRACE, "{"),
            (TokenType.RETURN, "return"),
            (TokenType.TRUE, "true"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.RBRACE, "}"),
            (TokenType.ELSE, "else"),
            (TokenType.LBRACE, "{"),
            (TokenType.RETURN, "return"),
            (TokenType.FALSE, "false"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.RBRACE, "}"),
            (TokenType.INT, "10"),
            (TokenType.EQ, "=="),
            (TokenType.INT, "10"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.INT, "10"),
            (TokenType.NOT_EQ, "!="),
            (TokenType.INT, "9"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.INT, "10"),
            (TokenType.GTE, ">="),
            (TokenType.INT, "4"),
            (TokenType.INT, "5"),
            (TokenType.LTE, "<="),
            (TokenType.INT, "5"),
            (TokenType.EOF, ""),
        ]
        assert [(tok.type, tok.literal) for tok in tokenize(_PROGRAM)] == expected

    def test_two_lexers_over_same_source_agree(self) -> None:
        assert list(Lexer(_PROGRAM)) == list(Lexer(_PROGRAM))
