# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared data model for Reef: tokens and syntax tree nodes."""

from reef.model.ast import IdentNode, NumberNode, ParseNode, ProductNode, Program, SumNode
from reef.model.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    # Tokens
    "TokenKind",
    "Token",
    "KEYWORDS",
    # Syntax tree
    "NumberNode",
    "IdentNode",
    "SumNode",
    "ProductNode",
    "ParseNode",
    "Program",
]
