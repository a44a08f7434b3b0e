# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for Reef expressions.

Converts a token stream produced by the scanner into a Program syntax tree.

Grammar::

    Program    := Expression* EndOfFile
    Expression := Sum
    Sum        := Product ( ("+" | "-") Product )*
    Product    := Primary ( ("*" | "/") Primary )*
    Primary    := Number | Ident | "(" Expression ")"
"""

from collections.abc import Callable

from reef.compiler.scanner import scan
from reef.model.ast import IdentNode, NumberNode, ParseNode, ProductNode, Program, SumNode
from reef.model.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############

# Maximum number of nested parentheses accepted by the parser.
MAX_NESTING_DEPTH = 200


class ParseError(Exception):
    """Raised when the parser encounters a syntactically invalid construct.

    Attributes:
        token: The offending token, or None if the token stream itself is malformed.
        line: 1-based line number of the offending token (0 if unknown).
        position: Index of the offending token in the token stream, not counting comments.
    """

    def __init__(self, message: str, token: Token | None, position: int) -> None:
        self.token = token
        self.line = token.line if token is not None else 0
        self.position = position
        if token is not None:
            super().__init__(f"Line {self.line}: {message}")
        else:
            super().__init__(message)


def parse(tokens: list[Token]) -> Program:
    """Parse a scanned token sequence into a Program.

    COMMENT tokens are ignored.

    Args:
        tokens: The scanner output; must end with a single EOF token.

    Returns:
        The Program root with one child per top-level expression.

    Raises:
        ParseError: If the token sequence is syntactically invalid.
    """
    return _Parser(tokens).parse()


def parse_source(source: str) -> Program:
    """Scan and parse Reef source text.

    Raises:
        LexError: If the source contains invalid characters or malformed literals.
        ParseError: If the source is syntactically invalid.
    """
    return parse(scan(source))


# ################
# Implementation
# ################

_SUM_OPERATORS = ("+", "-")
_PRODUCT_OPERATORS = ("*", "/")


class _Parser:
    """Recursive-descent parser for Reef token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ParseError("Token stream is not terminated by EndOfFile", None, len(tokens))
        self._tokens = [tok for tok in tokens if tok.kind != TokenKind.COMMENT]
        for index, tok in enumerate(self._tokens[:-1]):
            if tok.kind == TokenKind.EOF:
                raise ParseError("EndOfFile before the end of the token stream", tok, index)
        self._pos = 0
        self._depth = 0

    def parse(self) -> Program:
        """Parse the full token stream and return the Program root."""
        children: list[ParseNode] = []
        while not self._at_end():
            children.append(self._parse_expression())
        return Program(children=children)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._peek().kind == TokenKind.EOF

    def _advance(self) -> Token:
        """Consume and return the current token.

        Raises ParseError instead of moving past EOF.
        """
        tok = self._peek()
        if tok.kind == TokenKind.EOF:
            raise ParseError("Unexpected end of input", tok, self._pos)
        self._pos += 1
        return tok

    def _check(self, kind: TokenKind, *values: str) -> bool:
        """Return True if the current token has the given kind (and one of the
        given values, if any) without consuming it.
        """
        tok = self._peek()
        if tok.kind != kind:
            return False
        return not values or tok.value in values

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self) -> ParseNode:
        return self._parse_sum()

    def _parse_sum(self) -> ParseNode:
        """Parse: Product (("+" | "-") Product)*."""
        return self._parse_chain(SumNode, _SUM_OPERATORS, self._parse_product)

    def _parse_product(self) -> ParseNode:
        """Parse: Primary (("*" | "/") Primary)*."""
        return self._parse_chain(ProductNode, _PRODUCT_OPERATORS, self._parse_primary)

    def _parse_chain(
        self,
        node_type: type[SumNode] | type[ProductNode],
        operators: tuple[str, ...],
        parse_operand: Callable[[], ParseNode],
    ) -> ParseNode:
        """Parse a left-associative operator chain.

        A run of the same operator becomes one node with several operands, so
        ``a - b - c`` is ``(- a b c)``. A change of operator wraps everything
        parsed so far as the first operand of a new node: ``a + b - c`` is
        ``(- (+ a b) c)``.
        """
        operands = [parse_operand()]
        operator: str | None = None
        while self._check(TokenKind.OPERATOR, *operators):
            next_operator = self._advance().value
            if operator is not None and next_operator != operator:
                operands = [node_type(operator=operator, operands=operands)]
            operator = next_operator
            operands.append(parse_operand())
        if operator is None:
            return operands[0]
        return node_type(operator=operator, operands=operands)

    def _parse_primary(self) -> ParseNode:
        """Parse: Number | Ident | "(" Expression ")"."""
        tok = self._peek()
        if tok.kind == TokenKind.NUMBER:
            self._advance()
            return NumberNode(value=tok.value)
        if tok.kind == TokenKind.IDENT:
            self._advance()
            return IdentNode(name=tok.value)
        if tok.kind == TokenKind.LPAREN:
            if self._depth >= MAX_NESTING_DEPTH:
                raise ParseError(
                    f"Expression nested too deeply (more than {MAX_NESTING_DEPTH} levels of parentheses)",
                    tok,
                    self._pos,
                )
            self._advance()  # consume (
            self._depth += 1
            inner = self._parse_expression()
            self._depth -= 1
            if not self._check(TokenKind.RPAREN):
                actual = self._peek()
                raise ParseError(
                    f"Unbalanced parentheses: expected ')' to close '(' from line {tok.line}, "
                    f"got {actual.describe()}",
                    actual,
                    self._pos,
                )
            self._advance()  # consume )
            return inner
        raise ParseError(
            f"Expected number, identifier or '(', got {tok.describe()}",
            tok,
            self._pos,
        )
