# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Debug output for scanned tokens and parsed syntax trees.

Token dumps are plain text with one token per line, in the same textual form
as ``str(token)``. Syntax tree dumps are JSON produced by pydantic.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_core import PydanticSerializationError

from reef.model.ast import IdentNode, NumberNode, ParseNode, ProductNode, Program, SumNode
from reef.model.tokens import Token

# ###############
# Public Interface
# ###############


class DumpError(Exception):
    """Raised when a debug dump cannot be written."""


def format_tokens(tokens: list[Token]) -> str:
    """Return the token dump text: one token per line, newline-terminated."""
    return "".join(f"{token}\n" for token in tokens)


def write_token_dump(tokens: list[Token], path: Path) -> None:
    """Write the token dump to *path*, creating parent directories as needed.

    Raises:
        DumpError: If the file cannot be written.
    """
    _write(path, format_tokens(tokens), "token dump")


def write_ast_dump(program: Program, path: Path) -> None:
    """Write the syntax tree as indented JSON to *path*.

    Raises:
        DumpError: If the tree is too deep to serialize or the file cannot be written.
    """
    try:
        text = program.model_dump_json(indent=2)
    except PydanticSerializationError as exc:
        raise DumpError(f"Cannot serialize AST dump '{path}': {exc}") from exc
    _write(path, text + "\n", "AST dump")


def format_tree(node: Program | ParseNode) -> str:
    """Render a syntax tree as an S-expression, e.g. ``(+ 1 (* 2 3))``.

    A Program renders as one line per top-level expression. Rendering uses an
    explicit stack, so tree depth is not bounded by the recursion limit.
    """
    if isinstance(node, Program):
        return "\n".join(_format_expression(child) for child in node.children)
    return _format_expression(node)


# ################
# Implementation
# ################


def _format_expression(node: ParseNode) -> str:
    parts: list[str] = []
    # Items are either nodes still to render or literal text.
    stack: list[ParseNode | str] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, NumberNode):
            parts.append(_format_number(item.value))
        elif isinstance(item, IdentNode):
            parts.append(item.name)
        elif isinstance(item, (SumNode, ProductNode)):
            stack.append(")")
            for operand in reversed(item.operands):
                stack.append(operand)
                stack.append(" ")
            stack.append(f"({item.operator}")
        else:
            raise TypeError(f"Unsupported node type: {type(item).__name__}")
    return "".join(parts)


def _format_number(value: float) -> str:
    """Render integral floats without a trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _write(path: Path, text: str, label: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise DumpError(f"Cannot write {label} '{path}': {exc}") from exc
