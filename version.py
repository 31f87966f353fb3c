"""
Version information for the job board.

This file is the single source of truth for version numbers.
"""

__version__ = "0.1.0"
__version_info__ = (0, 1, 0)
