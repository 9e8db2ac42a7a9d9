"""Recursive permission and ownership changes (``chmod -R`` / ``chown -R``)."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from fileutils.errors import SourceNotFoundError, reraise_as
from fileutils.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fileutils.types import StrPath


def walk_tree(root: str) -> Iterator[str]:
    """Yield ``root`` and every entry beneath it, parents before children.

    A directory's listing is read before the directory itself is yielded, so
    callers may restrict its permissions without losing the listing. Symlinks
    are yielded but never descended into. Names are visited in sorted order.
    """
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        yield root
        return

    names = sorted(os.listdir(root))
    yield root
    for name in names:
        yield from walk_tree(os.path.join(root, name))


def chmod_r(path: StrPath, mode: int) -> None:
    """Set ``mode`` on ``path`` and everything below it. Stops at the first error."""
    with reraise_as(missing=SourceNotFoundError):
        for entry in walk_tree(os.fspath(path)):
            logger.debug("chmod", path=entry, mode=oct(mode))
            os.chmod(entry, mode)


def chown_r(path: StrPath, uid: int, gid: int) -> None:
    """Set ownership on ``path`` and everything below it.

    Pass ``-1`` for ``uid`` or ``gid`` to leave that id unchanged.
    """
    with reraise_as(missing=SourceNotFoundError):
        for entry in walk_tree(os.fspath(path)):
            logger.debug("chown", path=entry, uid=uid, gid=gid)
            os.chown(entry, uid, gid)
