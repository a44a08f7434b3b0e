# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for Reef."""
