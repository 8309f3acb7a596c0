"""
Logging for the parser and for the tool consuming its configuration.

- logger: the package logger; the parse core only emits DEBUG records and never
  installs handlers on its own.
- level(verbosity): map an occurrence count (-v, -vv, ...) to a logging level.
- configure(verbosity): install a rich handler on stderr at that level.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("feroxargs")

# -v warns, -vv informs, -vvv and beyond debug; nothing below errors otherwise.
LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)


def level(verbosity, /):
    """
    Translate a verbosity occurrence count into a logging level.

    >>> level(0) == logging.ERROR
    True
    >>> level(7) == logging.DEBUG
    True
    """
    if not isinstance(verbosity, int) or isinstance(verbosity, bool):
        raise TypeError("level() argument must be an integer")
    if verbosity < 0:
        raise ValueError("level() argument must be a non-negative integer")
    return LEVELS[min(verbosity, len(LEVELS) - 1)]


def configure(verbosity=0, /):
    """
    Route records from every logger through a stderr rich handler.

    Returns the level that was applied.
    """
    applied = level(verbosity)
    logging.basicConfig(
        level=applied,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return applied


__all__ = (
    "logger",
    "LEVELS",
    "level",
    "configure",
)
