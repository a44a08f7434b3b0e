# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Reef source files.

Converts raw source text into a sequence of tokens for subsequent parsing.
"""

from reef.model.tokens import KEYWORDS, Token, TokenKind

# ###############
# Public Interface
# ###############


class LexError(Exception):
    """Raised when the scanner encounters an invalid character or malformed literal.

    Attributes:
        line: 1-based line number of the error.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"Line {line}: {message}")
        self.line = line


def scan(source: str) -> list[Token]:
    """Scan Reef source text into a sequence of tokens.

    Whitespace is consumed silently. Line comments (``-- ...``) are kept as
    COMMENT tokens so that tooling can inspect them; the parser skips them.

    Args:
        source: The full text of a Reef source file.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexError: On unrecognised characters, malformed numbers, unterminated
            string literals, or invalid escape sequences.
    """
    return _Scanner(source).scan()


# ################
# Implementation
# ################

_OPERATOR_CHARS = frozenset("+=<>*/")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}


class _Scanner:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while not self._at_end():
            self._scan_token()
        self._tokens.append(Token(TokenKind.EOF, None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update line tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _add(self, kind: TokenKind, value: str | float | None, line: int) -> None:
        self._tokens.append(Token(kind, value, line))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line

        if ch.isspace():
            self._advance()
        elif ch in _OPERATOR_CHARS:
            self._advance()
            self._add(TokenKind.OPERATOR, ch, line)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier_or_keyword(line)
        elif ch.isdigit():
            self._scan_number(line)
        elif ch == "-":
            self._scan_hyphen(line)
        elif ch == '"':
            self._scan_string(line)
        elif ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            self._add(_SINGLE_CHAR_TOKENS[ch], None, line)
        else:
            raise LexError(f"Unrecognised character: {ch!r}", line)

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _scan_hyphen(self, line: int) -> None:
        """Scan '-', '->' or a '--' line comment."""
        self._advance()  # -
        nxt = self._current()
        if nxt == "-":
            self._advance()  # second -
            self._scan_comment(line)
        elif nxt == ">":
            self._advance()  # >
            self._add(TokenKind.OPERATOR, "->", line)
        else:
            self._add(TokenKind.OPERATOR, "-", line)

    def _scan_comment(self, line: int) -> None:
        """Consume a line comment up to, but excluding, the next newline."""
        start = self._pos
        while not self._at_end() and self._current() != "\n":
            self._advance()
        self._add(TokenKind.COMMENT, self._source[start : self._pos], line)

    def _scan_identifier_or_keyword(self, line: int) -> None:
        """Scan an identifier and reclassify it as a keyword if it is reserved."""
        start = self._pos
        while not self._at_end() and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        text = self._source[start : self._pos]
        kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENT
        self._add(kind, text, line)

    def _scan_number(self, line: int) -> None:
        """Scan a numeric literal into a float.

        Underscores act as digit-group separators and are dropped from the value.
        At most one decimal point is allowed.
        """
        start = self._pos
        digits: list[str] = []
        seen_dot = False
        while not self._at_end():
            ch = self._current()
            if ch.isdigit():
                digits.append(ch)
            elif ch == "_":
                pass
            elif ch == ".":
                if seen_dot:
                    raise LexError(
                        f"Malformed number {self._source[start : self._pos + 1]!r}: more than one decimal point",
                        line,
                    )
                seen_dot = True
                digits.append(ch)
            else:
                break
            self._advance()

        text = "".join(digits)
        try:
            value = float(text)
        except ValueError:
            raise LexError(f"Malformed number {text!r}", line) from None
        self._add(TokenKind.NUMBER, value, line)

    def _scan_string(self, line: int) -> None:
        """Scan a double-quoted string literal with escape sequences."""
        self._advance()  # opening "
        chars: list[str] = []
        while not self._at_end():
            ch = self._current()
            if ch == '"':
                self._advance()  # closing "
                self._add(TokenKind.STRING, "".join(chars), line)
                return
            if ch == "\\":
                self._advance()
                if self._at_end():
                    break
                esc = self._current()
                if esc not in _ESCAPES:
                    raise LexError(f"Invalid escape sequence: '\\{esc}'", self._line)
                chars.append(_ESCAPES[esc])
                self._advance()
            else:
                chars.append(self._advance())
        raise LexError("Unterminated string", line)
