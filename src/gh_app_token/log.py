from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAMES = ("gh_app_token", "httpx")


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Send package (and, when verbose, httpx) logs to stderr through rich.

    Safe to call more than once; previously installed handlers are replaced.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.propagate = False
    logging.getLogger("gh_app_token").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)
