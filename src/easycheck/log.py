"""Console logging for easycheck.

easycheck only emits DEBUG records through its module loggers, and reports
failed checks as exceptions or warnings, never as log records. Applications
that want to watch checks on the console call :func:`setup_logging` once:

- the ``easycheck`` logger gets a colored console handler
- warnings issued by checks (``handle_with=UserWarning`` and friends) are
  routed to the ``py.warnings`` logger and shown through the same handler

The root logger is left alone, so the application's own logging setup is not
disturbed. :func:`reset_logging` undoes the setup.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

import colorlog

PACKAGE_LOGGER = "easycheck"
WARNINGS_LOGGER = "py.warnings"
HANDLER_NAME = "easycheck-console"

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s in %(funcName)s:%(lineno)d: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _detach(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if h.get_name() == HANDLER_NAME:
            logger.removeHandler(h)


def setup_logging(
    verbose: bool = False,
    capture_warnings: bool = True,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Show easycheck logs and check warnings on the console.

    Calling it again replaces the previous handler instead of adding a second one.

    Args:
        verbose: Show DEBUG records of easycheck (skipped checks, path traversal).
        capture_warnings: Route warnings issued by checks into logging.
        stream: Output stream, stderr by default.

    Returns:
        The installed handler.
    """
    handler = colorlog.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        colorlog.ColoredFormatter(f"%(log_color)s{LOG_FORMAT}", log_colors=LOG_COLORS)
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _detach(package_logger)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    warnings_logger = logging.getLogger(WARNINGS_LOGGER)
    _detach(warnings_logger)
    if capture_warnings:
        warnings_logger.addHandler(handler)
    logging.captureWarnings(capture_warnings)
    return handler


def reset_logging() -> None:
    """Remove the handler installed by setup_logging and stop capturing warnings."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _detach(package_logger)
    package_logger.setLevel(logging.NOTSET)
    _detach(logging.getLogger(WARNINGS_LOGGER))
    logging.captureWarnings(False)


__all__ = ["LOG_FORMAT", "LOG_COLORS", "setup_logging", "reset_logging"]
