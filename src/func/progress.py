"""Progress reporting for rename runs.

The engine only knows the :class:`ProgressReporter` interface. The CLI wires in
either a plain logging reporter or one that also drives a click progress bar.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from .model import OutcomeKind, RenameOutcome, RunSummary


class ProgressReporter(Protocol):
    def on_item(self, outcome: RenameOutcome) -> None:
        ...

    def on_complete(self, summary: RunSummary) -> None:
        ...


def display_relative(root: Optional[Path], path: Path) -> str:
    """Render ``path`` relative to ``root`` when it lies below it."""

    if root is None:
        return str(path)
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def format_summary(summary: RunSummary) -> str:
    plural = "" if summary.renamed == 1 else "s"
    return (
        f"Converted {summary.renamed} file{plural} "
        f"(skipped: {summary.skipped}, failed: {summary.failed})"
    )


def format_breakdown(summary: RunSummary) -> str:
    """One count per outcome category, in a fixed order."""

    return (
        f"renamed: {summary.renamed}, ignored: {summary.ignored}, "
        f"skipped (exists): {summary.skipped_exists}, "
        f"skipped (symlink): {summary.skipped_symlink}, "
        f"skipped (unreadable): {summary.skipped_unreadable}, "
        f"failed: {summary.failed}"
    )


class LogReporter:
    """Write per-item warnings and errors to a logger.

    Parameters
    ----------
    logger
        Destination for messages. Built per run by the CLI.
    root
        Scan root, used to shorten paths in messages.
    """

    def __init__(self, logger: logging.Logger, root: Optional[Path] = None) -> None:
        self.logger = logger
        self.root = root

    def _rel(self, path: Optional[Path]) -> str:
        return display_relative(self.root, path) if path is not None else ""

    def on_item(self, outcome: RenameOutcome) -> None:
        source = self._rel(outcome.source)
        if outcome.kind is OutcomeKind.RENAMED:
            self.logger.debug("Renamed %s -> %s", source, self._rel(outcome.target))
        elif outcome.kind is OutcomeKind.SKIPPED_EXISTS:
            self.logger.warning(
                "Skipping %s (%s already exists)", source, self._rel(outcome.target)
            )
        elif outcome.kind is OutcomeKind.SKIPPED_SYMLINK:
            self.logger.warning("Skipping symlink %s", source)
        elif outcome.kind is OutcomeKind.SKIPPED_UNREADABLE:
            self.logger.warning("Skipping %s: %s", source, outcome.error)
        elif outcome.kind is OutcomeKind.FAILED:
            self.logger.error("Failed to rename %s: %s", source, outcome.error)

    def on_complete(self, summary: RunSummary) -> None:
        self.logger.info("%s", format_breakdown(summary))
        for failure in summary.failures:
            self.logger.error(
                "Could not rename %s: %s", self._rel(failure.source), failure.error
            )


class ProgressBarReporter(LogReporter):
    """Advance a click progress bar once per eligible file, then log as usual.

    ``bar`` is the object yielded by ``click.progressbar(length=...)``.
    """

    def __init__(
        self, bar: Any, logger: logging.Logger, root: Optional[Path] = None
    ) -> None:
        super().__init__(logger, root)
        self.bar = bar

    def on_item(self, outcome: RenameOutcome) -> None:
        super().on_item(outcome)
        if outcome.is_eligible:
            self.bar.update(1, current_item=self._rel(outcome.source))
