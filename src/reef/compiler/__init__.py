# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front end for Reef source files: scanning, parsing, and debug dumps."""

from reef.compiler.build import CompileResult, CompilerError, compile_file, compile_files, read_source
from reef.compiler.dump import DumpError, format_tokens, format_tree, write_ast_dump, write_token_dump
from reef.compiler.parser import ParseError, parse, parse_source
from reef.compiler.scanner import LexError, scan

__all__ = [
    "scan",
    "LexError",
    "parse",
    "parse_source",
    "ParseError",
    "read_source",
    "compile_file",
    "compile_files",
    "CompileResult",
    "CompilerError",
    "format_tokens",
    "format_tree",
    "write_token_dump",
    "write_ast_dump",
    "DumpError",
]
