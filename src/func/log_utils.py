"""Logging helpers for the CLI."""

from __future__ import annotations

import logging

import click


class ClickEchoHandler(logging.Handler):
    """Send log records to stderr through ``click.echo``.

    Keeps messages on the same stream as the click progress bar and lets
    ``CliRunner`` capture them in tests.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def build_logger(name: str, level: str = "INFO", fmt: str = "%(levelname)s: %(message)s") -> logging.Logger:
    """Return a logger with a single :class:`ClickEchoHandler` attached.

    Parameters
    ----------
    name
        Logger name.
    level
        Level name such as 'INFO' or 'DEBUG'.
    fmt
        Format string for the handler.
    """

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return logger
