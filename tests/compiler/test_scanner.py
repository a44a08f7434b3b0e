# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Reef lexical scanner."""

import pytest

from reef.compiler.scanner import LexError, scan
from reef.model.tokens import KEYWORDS, Token, TokenKind

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = scan(source)
    assert result[-1].kind == TokenKind.EOF
    return result[:-1]


def _kinds(source: str) -> list[TokenKind]:
    """Return the token kinds for all tokens except EOF."""
    return [tok.kind for tok in _tokens_no_eof(source)]


def _values(source: str) -> list[str | float | None]:
    """Return the token values for all tokens except EOF."""
    return [tok.value for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        assert scan("") == [Token(TokenKind.EOF)]

    def test_whitespace_only_produces_eof(self) -> None:
        assert scan("   \t\n  \r\n") == [Token(TokenKind.EOF)]

    def test_exactly_one_eof_and_it_is_last(self) -> None:
        tokens = scan('var x = (1 + 2) * "s" -- done\n{ a; b, c. d: e }')
        eofs = [i for i, tok in enumerate(tokens) if tok.kind == TokenKind.EOF]
        assert eofs == [len(tokens) - 1]

    def test_eof_line_is_last_line(self) -> None:
        tokens = scan("1\n2\n")
        assert tokens[-1].line == 3


# ###############
# Documented Examples
# ###############


class TestExamples:
    def test_assignment(self) -> None:
        assert scan("x = 5") == [
            Token(TokenKind.IDENT, "x"),
            Token(TokenKind.OPERATOR, "="),
            Token(TokenKind.NUMBER, 5.0),
            Token(TokenKind.EOF),
        ]

    def test_float_addition(self) -> None:
        assert scan("1.5 + 2") == [
            Token(TokenKind.NUMBER, 1.5),
            Token(TokenKind.OPERATOR, "+"),
            Token(TokenKind.NUMBER, 2.0),
            Token(TokenKind.EOF),
        ]

    def test_string(self) -> None:
        assert scan('"hello"') == [Token(TokenKind.STRING, "hello"), Token(TokenKind.EOF)]

    def test_digit_separator(self) -> None:
        assert scan("1_000") == [Token(TokenKind.NUMBER, 1000.0), Token(TokenKind.EOF)]

    def test_scanning_is_deterministic(self) -> None:
        source = 'fun add(a, b) { return a + b; } -- sum\nlog "x" -> 1_0.5'
        first = scan(source)
        second = scan(source)
        assert first == second
        assert [str(tok) for tok in first] == [str(tok) for tok in second]
        assert [tok.line for tok in first] == [tok.line for tok in second]


# ###############
# Keywords and Identifiers
# ###############


class TestKeywords:
    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_reserved_word_is_keyword(self, word: str) -> None:
        assert _tokens_no_eof(word) == [Token(TokenKind.KEYWORD, word)]

    def test_while_is_reserved(self) -> None:
        assert _kinds("while") == [TokenKind.KEYWORD]

    def test_keywords_are_case_sensitive(self) -> None:
        assert _kinds("If WHILE True") == [TokenKind.IDENT, TokenKind.IDENT, TokenKind.IDENT]

    def test_keyword_prefix_and_suffix_are_identifiers(self) -> None:
        assert _kinds("fo fork iff") == [TokenKind.IDENT, TokenKind.IDENT, TokenKind.IDENT]

    def test_keyword_set_is_closed(self) -> None:
        assert len(KEYWORDS) == 22


class TestIdentifiers:
    def test_simple_identifier(self) -> None:
        assert _tokens_no_eof("x") == [Token(TokenKind.IDENT, "x")]

    def test_underscores_are_retained(self) -> None:
        assert _values("my_var _private trailing_") == ["my_var", "_private", "trailing_"]

    def test_identifier_with_digits(self) -> None:
        assert _values("x1 a2b3") == ["x1", "a2b3"]

    def test_identifier_stops_at_punctuation(self) -> None:
        assert _kinds("a.b") == [TokenKind.IDENT, TokenKind.DOT, TokenKind.IDENT]


# ###############
# Numbers
# ###############


class TestNumbers:
    def test_integer(self) -> None:
        assert _tokens_no_eof("42") == [Token(TokenKind.NUMBER, 42.0)]

    def test_decimal(self) -> None:
        assert _values("3.25") == [3.25]

    def test_trailing_decimal_point(self) -> None:
        assert _values("7.") == [7.0]

    def test_separator_in_fraction(self) -> None:
        assert _values("1_000.000_5") == [1000.0005]

    def test_number_value_is_float(self) -> None:
        assert isinstance(_values("1")[0], float)

    def test_second_decimal_point_is_error(self) -> None:
        with pytest.raises(LexError, match="more than one decimal point"):
            scan("1.2.3")

    def test_error_carries_offending_text(self) -> None:
        with pytest.raises(LexError, match="1.2."):
            scan("1.2.3")

    def test_number_followed_by_identifier(self) -> None:
        assert _kinds("2x") == [TokenKind.NUMBER, TokenKind.IDENT]


# ###############
# Operators and Punctuation
# ###############


class TestOperators:
    @pytest.mark.parametrize("op", ["+", "=", "<", ">", "*", "/"])
    def test_single_character_operator(self, op: str) -> None:
        assert _tokens_no_eof(op) == [Token(TokenKind.OPERATOR, op)]

    def test_operators_are_single_characters(self) -> None:
        assert _values("<=") == ["<", "="]

    def test_minus(self) -> None:
        assert _tokens_no_eof("a - b") == [
            Token(TokenKind.IDENT, "a"),
            Token(TokenKind.OPERATOR, "-"),
            Token(TokenKind.IDENT, "b"),
        ]

    def test_minus_does_not_consume_lookahead(self) -> None:
        assert _tokens_no_eof("-1") == [Token(TokenKind.OPERATOR, "-"), Token(TokenKind.NUMBER, 1.0)]

    def test_minus_at_end_of_input(self) -> None:
        assert _tokens_no_eof("-") == [Token(TokenKind.OPERATOR, "-")]

    def test_arrow(self) -> None:
        assert _tokens_no_eof("->") == [Token(TokenKind.OPERATOR, "->")]

    def test_arrow_between_identifiers(self) -> None:
        assert _values("a->b") == ["a", "->", "b"]


class TestPunctuation:
    @pytest.mark.parametrize(
        ("source", "expected_kind"),
        [
            (":", TokenKind.COLON),
            (";", TokenKind.SEMICOLON),
            ("(", TokenKind.LPAREN),
            (")", TokenKind.RPAREN),
            ("{", TokenKind.LBRACE),
            ("}", TokenKind.RBRACE),
            (",", TokenKind.COMMA),
            (".", TokenKind.DOT),
        ],
    )
    def test_punctuation(self, source: str, expected_kind: TokenKind) -> None:
        assert _tokens_no_eof(source) == [Token(expected_kind)]

    def test_punctuation_has_no_value(self) -> None:
        assert _values("();") == [None, None, None]


# ###############
# Comments
# ###############


class TestComments:
    def test_comment_is_retained(self) -> None:
        assert _tokens_no_eof("-- hello") == [Token(TokenKind.COMMENT, " hello")]

    def test_comment_stops_before_newline(self) -> None:
        tokens = _tokens_no_eof("-- note\nx")
        assert tokens == [Token(TokenKind.COMMENT, " note"), Token(TokenKind.IDENT, "x")]
        assert tokens[1].line == 2

    def test_comment_after_code(self) -> None:
        assert _kinds("x -- trailing") == [TokenKind.IDENT, TokenKind.COMMENT]

    def test_empty_comment(self) -> None:
        assert _values("--") == [""]

    def test_comment_swallows_special_characters(self) -> None:
        assert _values('-- "unterminated $ 1.2.3') == [' "unterminated $ 1.2.3']


# ###############
# Strings
# ###############


class TestStrings:
    def test_empty_string(self) -> None:
        assert _values('""') == [""]

    def test_string_with_spaces(self) -> None:
        assert _values('"hello world"') == ["hello world"]

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r'"a\nb"', "a\nb"),
            (r'"a\tb"', "a\tb"),
            (r'"a\\b"', "a\\b"),
            (r'"say \"hi\""', 'say "hi"'),
        ],
    )
    def test_escape_sequences(self, source: str, expected: str) -> None:
        assert _values(source) == [expected]

    def test_invalid_escape_is_error(self) -> None:
        with pytest.raises(LexError, match="Invalid escape"):
            scan(r'"\q"')

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexError, match="Unterminated string"):
            scan('"unterminated')

    def test_backslash_at_end_is_unterminated(self) -> None:
        with pytest.raises(LexError, match="Unterminated string"):
            scan('"abc\\')

    def test_multiline_string_tracks_lines(self) -> None:
        tokens = _tokens_no_eof('"a\nb" x')
        assert tokens[0] == Token(TokenKind.STRING, "a\nb")
        assert tokens[0].line == 1
        assert tokens[1].line == 2

    def test_unterminated_string_reports_start_line(self) -> None:
        with pytest.raises(LexError) as exc_info:
            scan('x\n"abc\ndef')
        assert exc_info.value.line == 2


# ###############
# Line Tracking and Errors
# ###############


class TestLines:
    def test_tokens_record_line(self) -> None:
        tokens = _tokens_no_eof("a\nb\n\nc")
        assert [tok.line for tok in tokens] == [1, 2, 4]

    def test_line_is_not_part_of_equality(self) -> None:
        assert Token(TokenKind.IDENT, "a", 1) == Token(TokenKind.IDENT, "a", 9)


class TestErrors:
    @pytest.mark.parametrize("ch", ["$", "@", "#", "!", "[", "?"])
    def test_unrecognised_character(self, ch: str) -> None:
        with pytest.raises(LexError, match="Unrecognised character"):
            scan(ch)

    def test_error_names_character_and_line(self) -> None:
        with pytest.raises(LexError) as exc_info:
            scan("x\ny\n$")
        assert exc_info.value.line == 3
        assert "'$'" in str(exc_info.value)
        assert str(exc_info.value).startswith("Line 3:")
