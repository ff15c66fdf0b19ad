"""Suffix renaming between .NEV and .R3D.

Eligible files keep their directory and stem; only the suffix changes. An
existing destination is never overwritten.
"""

from __future__ import annotations

import os
from pathlib import Path

from .model import Candidate, Mode, OutcomeKind, RenameOutcome, RunSummary
from .progress import ProgressReporter
from .walk import iter_candidates


def is_eligible(candidate: Candidate, mode: Mode) -> bool:
    """Whether the candidate carries the mode's source suffix, ignoring case."""

    return candidate.extension == mode.source_suffix.lower()


def target_path(path: Path, mode: Mode) -> Path:
    """Destination of ``path`` with the mode's target suffix."""

    return path.with_suffix(mode.target_suffix)


def rename_candidate(candidate: Candidate, mode: Mode) -> RenameOutcome:
    """Rename one candidate if it is eligible and its destination is free.

    Parameters
    ----------
    candidate
        File found by the walker.
    mode
        Conversion direction.

    Returns
    -------
    RenameOutcome
        ``IGNORED`` for out-of-scope suffixes, ``SKIPPED_EXISTS`` on a
        collision, ``FAILED`` if the rename raised, ``RENAMED`` otherwise.
    """

    source = candidate.path
    if not is_eligible(candidate, mode):
        return RenameOutcome(kind=OutcomeKind.IGNORED, source=source)

    target = target_path(source, mode)
    # Best effort only; another process may still create it before the rename.
    if os.path.lexists(target):
        return RenameOutcome(kind=OutcomeKind.SKIPPED_EXISTS, source=source, target=target)

    try:
        os.rename(source, target)
    except OSError as exc:
        return RenameOutcome(
            kind=OutcomeKind.FAILED, source=source, target=target, error=str(exc)
        )
    return RenameOutcome(kind=OutcomeKind.RENAMED, source=source, target=target)


def count_eligible(root: Path, mode: Mode) -> int:
    """Count eligible files under ``root`` without renaming anything."""

    return sum(1 for c in iter_candidates(Path(root)) if is_eligible(c, mode))


def run(root: Path, mode: Mode, reporter: ProgressReporter) -> RunSummary:
    """Rename every eligible file under ``root``.

    Parameters
    ----------
    root
        Scan root. A missing or unreadable root raises ``ScanError`` before
        anything is renamed.
    mode
        Conversion direction.
    reporter
        Receives every outcome and the final summary.

    Returns
    -------
    RunSummary
        Counters for the run.
    """

    summary = RunSummary()

    def emit(outcome: RenameOutcome) -> None:
        summary.record(outcome)
        reporter.on_item(outcome)

    for candidate in iter_candidates(Path(root), on_skip=emit):
        emit(rename_candidate(candidate, mode))

    reporter.on_complete(summary)
    return summary
