# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the optional Reef project configuration file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".reef.yaml"
DEBUG_ENV_VAR = "REEF_DEBUG"
DEFAULT_TOKEN_DUMP = "tokens.debug"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The effective configuration for running the Reef front end.

    Attributes:
        debug: Whether to write debug dumps.
        token_dump: Path of the token dump, relative to the project directory.
        ast_dump: Optional path of the AST JSON dump, relative to the project directory.
    """

    debug: bool = False
    token_dump: str = DEFAULT_TOKEN_DUMP
    ast_dump: str | None = None


def load_project_config(directory: Path, environ: Mapping[str, str] | None = None) -> ProjectConfig:
    """Load the configuration for a project directory.

    The `.reef.yaml` file is optional; defaults are used when it is absent.
    The REEF_DEBUG environment variable, when set, overrides the `debug` key:
    ``"1"`` enables debug output and any other value disables it.

    Args:
        directory: Directory that may contain a `.reef.yaml` file.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        ProjectConfigError: If the file cannot be read or the configuration is invalid.
    """
    if environ is None:
        environ = os.environ

    path = directory / CONFIG_FILE_NAME
    if path.exists():
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc
        config = _parse_project_config(text, source_label=str(path))
    else:
        config = ProjectConfig()

    if DEBUG_ENV_VAR in environ:
        config.debug = environ[DEBUG_ENV_VAR] == "1"
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"debug", "token-dump", "ast-dump"})


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    An empty document yields the defaults.

    Raises:
        ProjectConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    unknown = sorted(str(key) for key in set(data) - _KNOWN_KEYS)
    if unknown:
        raise ProjectConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = ProjectConfig()
    if "debug" in data:
        if not isinstance(data["debug"], bool):
            raise ProjectConfigError(f"{source_label}: 'debug' must be a boolean")
        config.debug = data["debug"]
    if "token-dump" in data:
        config.token_dump = _require_string(data, "token-dump", source_label)
    if "ast-dump" in data:
        config.ast_dump = _require_string(data, "ast-dump", source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a non-empty string field from a mapping, raising ProjectConfigError otherwise."""
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ProjectConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value
