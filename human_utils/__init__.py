# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""
human-utils - Human-friendly file utilities

new, mov, del, nam and cop: ask before destroying, explain what changed.
"""

__version__ = "0.1.0"
