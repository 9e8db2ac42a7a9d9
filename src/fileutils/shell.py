"""Thin wrappers over single OS calls, named after the shell commands they replace."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from typing import TYPE_CHECKING

from fileutils.errors import ExecutableNotFoundError
from fileutils.infrastructure.logger import logger

if TYPE_CHECKING:
    from fileutils.types import StrPath


def mkdir_p(path: StrPath, mode: int = 0o777) -> None:
    """``mkdir -p``: create ``path`` and any missing parents. Existing directories are fine."""
    logger.debug("mkdir", path=os.fspath(path), mode=oct(mode))
    os.makedirs(path, mode, exist_ok=True)


def mv(old: StrPath, new: StrPath) -> None:
    """``mv``: rename ``old`` to ``new``, replacing ``new`` if it is a file."""
    logger.debug("move", source=os.fspath(old), dest=os.fspath(new))
    os.replace(old, new)


def rm(path: StrPath) -> None:
    """``rm``: remove a file, symlink or empty directory."""
    logger.debug("remove", path=os.fspath(path))
    if stat.S_ISDIR(os.lstat(path).st_mode):
        os.rmdir(path)
    else:
        os.remove(path)


def rm_rf(path: StrPath) -> None:
    """``rm -rf``: remove ``path`` and everything below it. A missing path is not an error."""
    try:
        info = os.lstat(path)
    except FileNotFoundError:
        return

    logger.debug("remove all", path=os.fspath(path))
    if stat.S_ISDIR(info.st_mode):
        shutil.rmtree(path)
    else:
        os.remove(path)


def which(name: str) -> str:
    """``which``: return the path of the executable ``name`` found on ``PATH``."""
    found = shutil.which(name)
    if found is None:
        raise ExecutableNotFoundError(errno.ENOENT, "executable file not found in $PATH", name)
    logger.debug("lookup", name=name, path=found)
    return found
