# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project-level configuration for the Reef front end."""

from reef.project.config import (
    CONFIG_FILE_NAME,
    DEBUG_ENV_VAR,
    DEFAULT_TOKEN_DUMP,
    ProjectConfig,
    ProjectConfigError,
    load_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEBUG_ENV_VAR",
    "DEFAULT_TOKEN_DUMP",
    "ProjectConfig",
    "ProjectConfigError",
    "load_project_config",
]
