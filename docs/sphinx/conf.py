# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Reef documentation."""

project = "Reef"
author = "Reef Contributors"
release = "0.1.0"

extensions: list[str] = []

html_theme = "alabaster"
