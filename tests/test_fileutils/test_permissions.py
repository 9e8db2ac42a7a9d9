"""Tests for recursive chmod/chown and the tree walk behind them."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import pytest

from fileutils.errors import SourceNotFoundError
from fileutils.permissions import chmod_r, chown_r, walk_tree

from .conftest import write_file

if TYPE_CHECKING:
    from pathlib import Path


class TestWalkTree:
    @pytest.fixture(autouse=True)
    def _setup(self, sample_tree: Path) -> None:
        self.root = sample_tree

    def test_yields_root_and_every_entry(self) -> None:
        rels = {os.path.relpath(p, self.root) for p in walk_tree(str(self.root))}
        assert rels == {
            ".",
            "top.txt",
            "link",
            "sub",
            "sub/nested.txt",
            "sub/deeper",
            "sub/deeper/leaf.sh",
        }

    def test_parents_come_before_children_in_sorted_order(self) -> None:
        rels = [os.path.relpath(p, self.root) for p in walk_tree(str(self.root))]
        assert rels == [
            ".",
            "link",
            "sub",
            "sub/deeper",
            "sub/deeper/leaf.sh",
            "sub/nested.txt",
            "top.txt",
        ]

    def test_single_file_root_yields_only_itself(self) -> None:
        assert list(walk_tree(str(self.root / "top.txt"))) == [str(self.root / "top.txt")]

    def test_does_not_descend_into_symlinked_directory(self) -> None:
        (self.root / "sub-link").symlink_to("sub")
        rels = {os.path.relpath(p, self.root) for p in walk_tree(str(self.root))}
        assert "sub-link" in rels
        assert "sub-link/nested.txt" not in rels


class TestChmodR:
    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path: Path) -> None:
        self.root = tmp_path / "tree"
        write_file(self.root / "a.txt", "a", 0o644)
        write_file(self.root / "d1" / "b.txt", "b", 0o600)
        write_file(self.root / "d1" / "d2" / "c.txt", "c", 0o755)

    def test_applies_mode_to_every_entry_including_root(self) -> None:
        chmod_r(self.root, 0o750)

        for entry in walk_tree(str(self.root)):
            assert stat.S_IMODE(os.stat(entry).st_mode) == 0o750

    def test_single_file(self) -> None:
        chmod_r(self.root / "a.txt", 0o400)
        assert stat.S_IMODE(os.stat(self.root / "a.txt").st_mode) == 0o400
        assert stat.S_IMODE(os.stat(self.root / "d1" / "b.txt").st_mode) == 0o600

    def test_restrictive_directory_mode_still_reaches_children(self) -> None:
        chmod_r(self.root, 0o555)

        assert stat.S_IMODE(os.stat(self.root / "d1" / "d2" / "c.txt").st_mode) == 0o555
        chmod_r(self.root, 0o755)

    def test_symlink_target_inside_tree_is_changed_through_link(self) -> None:
        (self.root / "link").symlink_to("a.txt")

        chmod_r(self.root, 0o700)

        assert stat.S_IMODE(os.stat(self.root / "a.txt").st_mode) == 0o700

    def test_missing_root_raises_source_not_found(self) -> None:
        with pytest.raises(SourceNotFoundError):
            chmod_r(self.root / "missing", 0o755)

    def test_dangling_symlink_stops_walk(self) -> None:
        (self.root / "0-dangling").symlink_to("nowhere")

        with pytest.raises(FileNotFoundError):
            chmod_r(self.root, 0o700)

        # Root was changed before the failing entry; later siblings were not.
        assert stat.S_IMODE(os.stat(self.root).st_mode) == 0o700
        assert stat.S_IMODE(os.stat(self.root / "a.txt").st_mode) == 0o644


@pytest.mark.skipif(not hasattr(os, "chown"), reason="needs POSIX ownership")
class TestChownR:
    @pytest.fixture(autouse=True)
    def _setup(self, sample_tree: Path) -> None:
        self.root = sample_tree

    def test_chown_to_current_owner_succeeds_for_every_entry(self) -> None:
        uid, gid = os.getuid(), os.getgid()

        chown_r(self.root, uid, gid)

        for entry in walk_tree(str(self.root)):
            info = os.stat(entry)
            assert (info.st_uid, info.st_gid) == (uid, gid)

    def test_minus_one_leaves_ids_unchanged(self) -> None:
        before = os.stat(self.root / "top.txt")

        chown_r(self.root, -1, -1)

        after = os.stat(self.root / "top.txt")
        assert (after.st_uid, after.st_gid) == (before.st_uid, before.st_gid)

    def test_missing_root_raises_source_not_found(self) -> None:
        with pytest.raises(SourceNotFoundError):
            chown_r(self.root / "missing", os.getuid(), os.getgid())
