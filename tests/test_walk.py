import os
from pathlib import Path

import pytest

from conftest import skip_if_root
from src.func.model import (
    OutcomeKind,
    RootNotADirectory,
    RootNotFound,
    RootNotReadable,
    ScanError,
)
from src.func.walk import check_root, iter_candidates


def test_yields_every_regular_file_once(make_tree):
    root = make_tree(
        {
            "a.NEV": b"a",
            "b.txt": b"b",
            "sub/c.nev": b"c",
            "sub/deeper/d.R3D": b"d",
        }
    )

    found = [c.path.relative_to(root) for c in iter_candidates(root)]

    assert sorted(map(str, found)) == [
        "a.NEV",
        "b.txt",
        os.path.join("sub", "c.nev"),
        os.path.join("sub", "deeper", "d.R3D"),
    ]
    assert len(found) == len(set(found))


def test_candidates_are_absolute_with_lowercase_extension(make_tree):
    root = make_tree({"clip.NeV": b"x", "noext": b"y"})

    by_name = {c.path.name: c for c in iter_candidates(root)}

    assert by_name["clip.NeV"].extension == ".nev"
    assert by_name["noext"].extension == ""
    assert all(c.path.is_absolute() for c in by_name.values())


def test_files_come_in_name_order_depth_first(make_tree):
    root = make_tree({"b/2.NEV": b"", "a/1.NEV": b"", "0.NEV": b"", "c.NEV": b""})

    names = [c.path.name for c in iter_candidates(root)]

    assert names == ["0.NEV", "c.NEV", "1.NEV", "2.NEV"]


def test_is_lazy(make_tree):
    root = make_tree({"a.NEV": b""})

    gen = iter_candidates(root)

    assert next(gen).path.name == "a.NEV"
    with pytest.raises(StopIteration):
        next(gen)


def test_symlinks_are_reported_and_not_followed(make_tree, tmp_path_factory):
    root = make_tree({"real/a.NEV": b"a"})
    outside = tmp_path_factory.mktemp("outside")
    (outside / "hidden.NEV").write_bytes(b"h")
    os.symlink(outside, root / "linked_dir")
    os.symlink(root / "real" / "a.NEV", root / "link.NEV")

    skipped = []
    found = [c.path.name for c in iter_candidates(root, on_skip=skipped.append)]

    assert found == ["a.NEV"]
    assert sorted(o.source.name for o in skipped) == ["link.NEV", "linked_dir"]
    assert all(o.kind is OutcomeKind.SKIPPED_SYMLINK for o in skipped)


@skip_if_root
def test_unreadable_subdirectory_is_skipped(make_tree):
    root = make_tree({"ok/a.NEV": b"a", "locked/b.NEV": b"b"})
    locked = root / "locked"
    locked.chmod(0)
    try:
        skipped = []
        found = [c.path.name for c in iter_candidates(root, on_skip=skipped.append)]
    finally:
        locked.chmod(0o755)

    assert found == ["a.NEV"]
    assert [o.kind for o in skipped] == [OutcomeKind.SKIPPED_UNREADABLE]
    assert skipped[0].source == locked
    assert skipped[0].error


def test_missing_root_raises_root_not_found(tmp_path):
    with pytest.raises(RootNotFound):
        list(iter_candidates(tmp_path / "no" / "such" / "dir"))


def test_file_root_raises_not_a_directory(tmp_path):
    f = tmp_path / "file.NEV"
    f.write_bytes(b"")

    with pytest.raises(RootNotADirectory):
        check_root(f)


@skip_if_root
def test_unlistable_root_raises_not_readable(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(RootNotReadable):
            check_root(locked)
    finally:
        locked.chmod(0o755)


def test_root_errors_share_a_base_class(tmp_path):
    with pytest.raises(ScanError) as info:
        check_root(tmp_path / "missing")

    assert "does not exist" in str(info.value)


def test_relative_root_is_resolved(make_tree, monkeypatch):
    root = make_tree({"sub/a.NEV": b""})
    monkeypatch.chdir(root)

    assert check_root(Path("sub")) == (root / "sub").resolve()


def test_symlinked_root_is_canonicalised(make_tree, tmp_path_factory):
    root = make_tree({"a.NEV": b""})
    alias = tmp_path_factory.mktemp("alias") / "root_link"
    os.symlink(root, alias)

    assert check_root(alias) == root.resolve()
    assert [c.path.name for c in iter_candidates(alias)] == ["a.NEV"]


@skip_if_root
def test_root_behind_unsearchable_parent_is_not_readable(tmp_path):
    parent = tmp_path / "parent"
    (parent / "root").mkdir(parents=True)
    parent.chmod(0)
    try:
        with pytest.raises(RootNotReadable):
            check_root(parent / "root")
    finally:
        parent.chmod(0o755)


def test_path_through_a_file_is_not_found(tmp_path):
    f = tmp_path / "file.NEV"
    f.write_bytes(b"")

    with pytest.raises(RootNotFound):
        check_root(f / "child")
