"""Logging helpers used by the litcal CLI.

The library itself only creates module loggers; handlers are installed by
the command-line entry point through `configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "litcal"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix such as "[matplotlib]"."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show logger names, timestamps and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    color_system: Optional[Literal["auto"]] = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(asctime)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(verbosity: int = 0, debug_mode: bool = False, color: bool = True) -> RichHandler:
    """Install a single console handler on the root logger.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug.
        debug_mode: Forwarded to `config_console_handler`.
        color: Forwarded to `config_console_handler`.

    Returns:
        RichHandler: The installed handler.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)

    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(handler.level)
    return handler
