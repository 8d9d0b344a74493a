"""Logging configuration for plaintodo."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"debug"`` into a logging level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Send plaintodo logs to stderr through rich.

    Earlier handlers on the package logger are replaced, so calling this
    more than once does not duplicate output.
    """
    package_logger = logging.getLogger("plaintodo")
    package_logger.setLevel(resolve_level(level))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)

    return package_logger
