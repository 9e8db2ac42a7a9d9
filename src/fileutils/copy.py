"""Single file and directory tree copies, in the manner of ``cp``."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from typing import TYPE_CHECKING

from fileutils.errors import (
    CopyIOError,
    DestinationExistsError,
    LinkReadError,
    NotADirectoryOperationError,
    SourceNotFoundError,
    reraise_as,
)
from fileutils.infrastructure.logger import logger
from fileutils.types import CopyOptions

if TYPE_CHECKING:
    from fileutils.types import StrPath

COPY_BUFFER_SIZE = 1024 * 1024  # 1MiB


def cp(source: StrPath, dest: StrPath) -> None:
    """Copy a single file, like ``cp``. Directories are rejected."""
    cp_with_options(source, dest, CopyOptions())


def cp_r(source: StrPath, dest: StrPath) -> None:
    """Copy a file or directory tree, like ``cp -R``."""
    cp_with_options(source, dest, CopyOptions(recursive=True))


def cp_follow_links(source: StrPath, dest: StrPath) -> None:
    """Copy the content a link points at rather than the link itself."""
    cp_with_options(source, dest, CopyOptions())


def cp_preserve_links(source: StrPath, dest: StrPath) -> None:
    """Copy a single entry, recreating symlinks instead of following them."""
    cp_with_options(source, dest, CopyOptions(preserve_links=True))


def cp_with_options(source: StrPath, dest: StrPath, options: CopyOptions | None = None) -> None:
    """Copy ``source`` to ``dest`` as directed by ``options``.

    Directories require ``options.recursive`` and a destination that does not
    exist yet. Children are copied depth-first with the same options; the first
    failure aborts the copy and leaves whatever was already written in place.

    With ``preserve_links`` any non-regular entry is recreated as a symlink to
    the same target. Otherwise file content is streamed into ``dest`` (created
    or truncated), its permission bits are set to the source's, and it is synced
    to disk before returning.
    """
    if options is None:
        options = CopyOptions()
    source = os.fspath(source)
    dest = os.fspath(dest)

    with reraise_as(missing=SourceNotFoundError):
        source_info = os.lstat(source) if options.preserve_links else os.stat(source)

    if stat.S_ISDIR(source_info.st_mode):
        _copy_tree(source, dest, source_info, options)
    elif options.preserve_links and not stat.S_ISREG(source_info.st_mode):
        _copy_symlink(source, dest)
    else:
        _copy_file(source, dest, source_info, options)


def _exists(path: str) -> bool:
    # Only "not found" means absent; other lstat failures propagate.
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    return True


def _copy_tree(source: str, dest: str, source_info: os.stat_result, options: CopyOptions) -> None:
    if not options.recursive:
        raise NotADirectoryOperationError(errno.EISDIR, "source is a directory", source)

    if _exists(dest):
        raise DestinationExistsError(errno.EEXIST, "destination already exists", dest)

    mode = stat.S_IMODE(source_info.st_mode)
    logger.debug("Copying directory", source=source, dest=dest, mode=oct(mode))
    # Writable by the owner until the children are in; the final chmod is not masked by the umask.
    with reraise_as(CopyIOError):
        os.makedirs(dest, mode | stat.S_IRWXU)
        names = os.listdir(source)

    for name in names:
        cp_with_options(os.path.join(source, name), os.path.join(dest, name), options)

    with reraise_as(CopyIOError):
        os.chmod(dest, mode)


def _copy_symlink(source: str, dest: str) -> None:
    with reraise_as(LinkReadError):
        target = os.readlink(source)

    logger.debug("Copying symlink", source=source, dest=dest, target=target)
    with reraise_as(CopyIOError):
        os.symlink(target, dest)


def _same_file(source: str, dest: str) -> bool:
    # A missing or unreachable dest is left for open() to report.
    try:
        return os.path.samefile(source, dest)
    except OSError:
        return False


def _copy_file(source: str, dest: str, source_info: os.stat_result, options: CopyOptions) -> None:
    if _same_file(source, dest):
        raise CopyIOError(errno.EINVAL, "source and destination are the same file", source, None, dest)

    logger.debug("Copying file", source=source, dest=dest, size=source_info.st_size)
    with reraise_as(CopyIOError), open(source, "rb") as src_file, open(dest, "wb") as dest_file:
        shutil.copyfileobj(src_file, dest_file, COPY_BUFFER_SIZE)
        # Buffered bytes must land before the timestamps are set.
        dest_file.flush()

        os.chmod(dest, stat.S_IMODE(source_info.st_mode))

        if options.preserve_timestamps:
            mtime_ns = source_info.st_mtime_ns
            os.utime(dest, ns=(mtime_ns, mtime_ns))

        os.fsync(dest_file.fileno())
