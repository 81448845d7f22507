"""Diagnostics package.

- easter_table, pretty_month: always available, text output only
- easter_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["easter_table", "easter_scatter", "pretty_month"]
