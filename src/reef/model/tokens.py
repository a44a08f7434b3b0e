# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token definitions shared by the Reef scanner and parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the Reef scanner.

    The enum value is the name used in the textual token form, e.g. ``Ident("x")``.
    """

    # Payload-carrying tokens
    OPERATOR = "Operator"
    KEYWORD = "Keyword"
    IDENT = "Ident"
    STRING = "String"
    NUMBER = "Number"
    COMMENT = "Comment"

    # Punctuation
    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"
    SEMICOLON = "Semicolon"
    COLON = "Colon"
    COMMA = "Comma"
    DOT = "Dot"

    # End of file
    EOF = "EndOfFile"


# Reserved words. Identifier-shaped text in this set is always a KEYWORD token.
KEYWORDS: frozenset[str] = frozenset(
    {
        "continue",
        "struct",
        "elseif",
        "return",
        "typeof",
        "false",
        "while",
        "break",
        "true",
        "else",
        "then",
        "type",
        "for",
        "fun",
        "nil",
        "not",
        "and",
        "var",
        "log",
        "do",
        "if",
        "or",
    }
)


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        kind: The kind of token.
        value: The payload: text for operators, keywords, identifiers, strings
            and comments, a float for numbers, None for punctuation and EOF.
        line: 1-based line number where the token starts. Not part of equality.
    """

    kind: TokenKind
    value: str | float | None = None
    line: int = field(default=1, compare=False)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        if isinstance(self.value, float):
            return f"{self.kind.value}({self.value!r})"
        return f"{self.kind.value}({_quote(self.value)})"

    def describe(self) -> str:
        """Return a short human-readable description for error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        if self.value is None:
            return repr(_PUNCTUATION_TEXT[self.kind])
        if isinstance(self.value, float):
            return f"number {self.value!r}"
        return f"{self.kind.value.lower()} {self.value!r}"


# ################
# Implementation
# ################

_PUNCTUATION_TEXT: dict[TokenKind, str] = {
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.SEMICOLON: ";",
    TokenKind.COLON: ":",
    TokenKind.COMMA: ",",
    TokenKind.DOT: ".",
}


def _quote(text: str) -> str:
    """Render text inside double quotes, escaping quotes, backslashes and control characters."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")
    return f'"{escaped}"'
