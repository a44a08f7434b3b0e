# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scan-then-parse pipeline for Reef source files.

Each file is read fully into memory, scanned to completion, and only then
parsed. Files share no state, so the results for one file never depend on
another.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reef.compiler.parser import ParseError, parse
from reef.compiler.scanner import LexError, scan
from reef.model.ast import Program
from reef.model.tokens import Token

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a source file cannot be read, scanned, or parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CompileResult:
    """The output of the front end for one source file.

    Attributes:
        path: The source file.
        tokens: The full token sequence, including comments and the EOF token.
        program: The parsed syntax tree.
    """

    path: Path
    tokens: list[Token]
    program: Program


def read_source(path: Path) -> str:
    """Read a Reef source file as UTF-8 text.

    Raises:
        CompilerError: If the file does not exist, cannot be read, or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CompilerError(f"Source file not found: {path}") from None
    except UnicodeDecodeError as exc:
        raise CompilerError(f"Source file '{path}' is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise CompilerError(f"Cannot read source file '{path}': {exc}") from exc


def compile_file(path: Path) -> CompileResult:
    """Read, scan, and parse a single source file.

    Raises:
        CompilerError: On read failures and on lexical or syntax errors. The
            original LexError or ParseError is chained as the cause.
    """
    source = read_source(path)
    try:
        tokens = scan(source)
    except LexError as exc:
        raise CompilerError(f"{path}: {exc}") from exc
    try:
        program = parse(tokens)
    except ParseError as exc:
        raise CompilerError(f"{path}: {exc}") from exc
    return CompileResult(path=path, tokens=tokens, program=program)


def compile_files(paths: list[Path]) -> dict[Path, CompileResult]:
    """Compile several independent source files.

    Returns:
        A mapping from each path to its CompileResult, in input order.

    Raises:
        CompilerError: For the first file that fails.
    """
    results: dict[Path, CompileResult] = {}
    for path in paths:
        results[path] = compile_file(path)
    return results
