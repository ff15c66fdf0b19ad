"""Data types shared by the walker, the rename engine and the reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from config import SOURCE_SUFFIX, TARGET_SUFFIX


class ScanError(Exception):
    """The scan root cannot be traversed. Aborts the whole run."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"{root} {reason}")
        self.root = root


class RootNotFound(ScanError):
    def __init__(self, root: Path) -> None:
        super().__init__(root, "does not exist")


class RootNotADirectory(ScanError):
    def __init__(self, root: Path) -> None:
        super().__init__(root, "is not a directory")


class RootNotReadable(ScanError):
    def __init__(self, root: Path, detail: str) -> None:
        super().__init__(root, f"is not accessible: {detail}")


class Mode(Enum):
    """Conversion direction."""

    FORWARD = "forward"
    INVERTED = "inverted"

    @classmethod
    def from_invert(cls, invert: bool) -> "Mode":
        return cls.INVERTED if invert else cls.FORWARD

    @property
    def source_suffix(self) -> str:
        return TARGET_SUFFIX if self is Mode.INVERTED else SOURCE_SUFFIX

    @property
    def target_suffix(self) -> str:
        return SOURCE_SUFFIX if self is Mode.INVERTED else TARGET_SUFFIX


@dataclass(frozen=True)
class Candidate:
    """A regular file found during traversal."""

    path: Path
    extension: str  # lower-cased, with the leading dot; "" if none

    @classmethod
    def from_path(cls, path: Path) -> "Candidate":
        return cls(path=path, extension=path.suffix.lower())


class OutcomeKind(Enum):
    RENAMED = "renamed"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_UNREADABLE = "skipped_unreadable"
    SKIPPED_SYMLINK = "skipped_symlink"
    IGNORED = "ignored"
    FAILED = "failed"


@dataclass(frozen=True)
class RenameOutcome:
    """Result for one path seen during a run."""

    kind: OutcomeKind
    source: Path
    target: Optional[Path] = None
    error: str = ""

    @property
    def is_eligible(self) -> bool:
        """True for outcomes of files that matched the source suffix."""
        return self.kind in (
            OutcomeKind.RENAMED,
            OutcomeKind.SKIPPED_EXISTS,
            OutcomeKind.FAILED,
        )


@dataclass
class RunSummary:
    """Aggregate counters for one run."""

    renamed: int = 0
    skipped_exists: int = 0
    skipped_unreadable: int = 0
    skipped_symlink: int = 0
    ignored: int = 0
    failed: int = 0
    failures: List[RenameOutcome] = field(default_factory=list)

    def record(self, outcome: RenameOutcome) -> None:
        counter = outcome.kind.value
        setattr(self, counter, getattr(self, counter) + 1)
        if outcome.kind is OutcomeKind.FAILED:
            self.failures.append(outcome)

    @property
    def eligible(self) -> int:
        return self.renamed + self.skipped_exists + self.failed

    @property
    def skipped(self) -> int:
        return self.skipped_exists + self.skipped_unreadable + self.skipped_symlink

    @property
    def total(self) -> int:
        return self.eligible + self.skipped_unreadable + self.skipped_symlink + self.ignored
