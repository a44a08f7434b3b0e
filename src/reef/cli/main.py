# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Reef command-line interface."""

import argparse
import sys
from pathlib import Path

from reef.compiler.build import CompilerError, compile_file
from reef.compiler.dump import DumpError, format_tree, write_ast_dump, write_token_dump
from reef.project.config import ProjectConfigError, load_project_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Reef CLI."""
    parser = argparse.ArgumentParser(
        prog="reef",
        description="Reef - scan and parse a Reef source file",
    )
    parser.add_argument("path", help="Path to the Reef source file")

    args = parser.parse_args()
    sys.exit(_run(Path(args.path)))


# ################
# Implementation
# ################


def _run(path: Path) -> int:
    """Compile *path*, write debug dumps if enabled, and print the syntax tree."""
    path = path.resolve()
    directory = path.parent

    try:
        config = load_project_config(directory)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        result = compile_file(path)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.debug:
        try:
            token_dump = directory / config.token_dump
            write_token_dump(result.tokens, token_dump)
            print(f"Token dump written to '{token_dump}'.", file=sys.stderr)
            if config.ast_dump is not None:
                ast_dump = directory / config.ast_dump
                write_ast_dump(result.program, ast_dump)
                print(f"AST dump written to '{ast_dump}'.", file=sys.stderr)
        except DumpError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if result.program.children:
        print(format_tree(result.program))
    return 0
