"""Shared pytest fixtures for the renaming tests."""

import os
import sys
from pathlib import Path

# Add project root to sys.path so 'config', 'main' and 'src' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relative_path: content} mapping."""

    def _make(files):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return tmp_path

    return _make


def names_under(root: Path):
    """Relative names of every non-directory entry below root."""
    return sorted(
        str(p.relative_to(root)) for p in root.rglob("*") if p.is_file() or p.is_symlink()
    )


class RecordingReporter:
    def __init__(self):
        self.items = []
        self.summaries = []

    def on_item(self, outcome):
        self.items.append(outcome)

    def on_complete(self, summary):
        self.summaries.append(summary)


@pytest.fixture
def reporter():
    return RecordingReporter()


skip_if_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
