#!/usr/bin/env python3
# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the Reef CI checks locally.

Usage: ``tools/ci.py [STEP ...]`` where STEP is one of the step keys below.
With no arguments every step runs.
"""

import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Step:
    """One CI step: a short key for selection, a title, and the command to run."""

    key: str
    title: str
    command: list[str]


STEPS: list[Step] = [
    Step("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    Step("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    Step("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    Step("test", "Tests", ["uv", "run", "pytest", "--cov=reef", "--cov-report=term-missing"]),
    Step("build", "Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a summary."""
    known = {step.key: step for step in STEPS}
    unknown = [key for key in argv if key not in known]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(known)}"))
        return 2
    selected = [known[key] for key in argv] if argv else STEPS

    results = [_run_step(step) for step in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(step: Step) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_RULE)}\n{chalk.blue(step.title)}\n{chalk.blue(_RULE)}")
    start = time.monotonic()
    proc = subprocess.run(step.command, cwd=Path(__file__).resolve().parent.parent)
    return step.title, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_RULE)}\n{chalk.blue('  Summary')}\n{chalk.blue(_RULE)}")
    for title, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
