# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reef: scanner and recursive-descent parser for the Reef scripting language."""

__version__ = "0.1.0"
