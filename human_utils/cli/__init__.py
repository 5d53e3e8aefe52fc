# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Command line front-end for human-utils."""
