"""Shared fixtures for file operation tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

FIXED_MTIME = 1_600_000_000  # 2020-09-13T12:26:40Z


def write_file(path: Path, content: str, mode: int = 0o644) -> Path:
    """Write ``content`` to ``path`` and set its permission bits."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.chmod(path, mode)
    return path


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create a three-level tree with a regular file, a subdirectory and a symlink.

    src/
      top.txt                 (0644, fixed mtime)
      sub/
        nested.txt            (0600)
        deeper/
          leaf.sh             (0755)
      link -> top.txt
    """
    root = tmp_path / "src"
    top = write_file(root / "top.txt", "top level\n", 0o644)
    os.utime(top, (FIXED_MTIME, FIXED_MTIME))
    write_file(root / "sub" / "nested.txt", "nested\n", 0o600)
    write_file(root / "sub" / "deeper" / "leaf.sh", "#!/bin/sh\necho leaf\n", 0o755)
    (root / "link").symlink_to("top.txt")
    return root


def relative_entries(root: Path) -> set[str]:
    """Every path under ``root`` relative to it, symlinks included, not followed."""
    entries: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            entries.add(os.path.relpath(os.path.join(dirpath, name), root))
    return entries


requires_non_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="root bypasses permission checks",
)
