"""Directory traversal.

Enumerates regular files below a root with an explicit stack of directories.
Symlinks are never followed and unreadable entries are skipped; both are
handed to an optional ``on_skip`` callback instead of being raised.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .model import (
    Candidate,
    OutcomeKind,
    RenameOutcome,
    RootNotADirectory,
    RootNotFound,
    RootNotReadable,
)


SkipCallback = Callable[[RenameOutcome], None]


def check_root(root: Path) -> Path:
    """Validate and canonicalise a scan root.

    Parameters
    ----------
    root
        Directory to scan. Relative paths are resolved against the cwd.

    Returns
    -------
    Path
        The absolute, symlink-free root.

    Raises
    ------
    RootNotFound, RootNotADirectory, RootNotReadable
        When the root cannot be scanned.
    """

    path = Path(root).absolute()
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise RootNotFound(path) from exc
    except OSError as exc:
        # e.g. a parent directory without search permission
        raise RootNotReadable(path, exc.strerror or str(exc)) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise RootNotADirectory(path)
    try:
        resolved = path.resolve(strict=True)
        with os.scandir(resolved):
            pass
    except OSError as exc:
        raise RootNotReadable(path, exc.strerror or str(exc)) from exc
    return resolved


def _list_dir(directory: Path) -> List[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def iter_candidates(
    root: Path, on_skip: Optional[SkipCallback] = None
) -> Iterator[Candidate]:
    """Yield every regular file under ``root``.

    Parameters
    ----------
    root
        Directory to scan. Validated with :func:`check_root` when iteration
        starts.
    on_skip
        Receives a ``SKIPPED_SYMLINK`` or ``SKIPPED_UNREADABLE`` outcome for
        each entry left out.

    Yields
    ------
    Candidate
        Files in name order within each directory, depth first.
    """

    def skip(kind: OutcomeKind, path: Path, error: str = "") -> None:
        if on_skip is not None:
            on_skip(RenameOutcome(kind=kind, source=path, error=error))

    start = check_root(root)
    stack: List[Path] = [start]

    while stack:
        directory = stack.pop()
        try:
            entries = _list_dir(directory)
        except OSError as exc:
            if directory == start:
                raise RootNotReadable(start, exc.strerror or str(exc)) from exc
            skip(OutcomeKind.SKIPPED_UNREADABLE, directory, str(exc))
            continue

        subdirs: List[Path] = []
        for entry in entries:
            path = Path(entry.path)
            try:
                is_link = entry.is_symlink()
                is_dir = not is_link and entry.is_dir(follow_symlinks=False)
                is_file = not is_link and entry.is_file(follow_symlinks=False)
            except OSError as exc:
                skip(OutcomeKind.SKIPPED_UNREADABLE, path, str(exc))
                continue

            if is_link:
                skip(OutcomeKind.SKIPPED_SYMLINK, path)
            elif is_dir:
                subdirs.append(path)
            elif is_file:
                yield Candidate.from_path(path)

        # Reversed so the stack pops them in name order.
        stack.extend(reversed(subdirs))
