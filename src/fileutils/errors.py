"""Exception hierarchy for file operations.

Every error is an ``OSError`` so existing ``except OSError`` handlers keep
working. Where a built-in subclass exists for the same condition, the error
derives from it too (``SourceNotFoundError`` is a ``FileNotFoundError``).
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class FileUtilsError(OSError):
    """Base class for errors raised by fileutils operations."""

    @classmethod
    def from_os_error(cls, err: OSError) -> FileUtilsError:
        """Build an instance carrying the errno, message and paths of ``err``."""
        if err.errno is None:
            wrapped = cls(str(err))
            wrapped.filename = err.filename
            return wrapped
        return cls(err.errno, err.strerror, err.filename, None, err.filename2)


class SourceNotFoundError(FileUtilsError, FileNotFoundError):
    """The source (or walk root) does not exist."""


class NotADirectoryOperationError(FileUtilsError, IsADirectoryError):
    """A directory was given to a copy that was not asked to recurse."""


class DestinationExistsError(FileUtilsError, FileExistsError):
    """The copy destination is already present."""


class PermissionDeniedError(FileUtilsError, PermissionError):
    pass


class CopyIOError(FileUtilsError):
    """Opening, writing, syncing or updating metadata of a copy failed."""


class LinkReadError(FileUtilsError):
    """The target of a symbolic link could not be read."""


class ExecutableNotFoundError(FileUtilsError, FileNotFoundError):
    """No executable with the requested name is on the search path."""


@contextlib.contextmanager
def reraise_as(
    fallback: type[FileUtilsError] | None = None,
    *,
    missing: type[FileUtilsError] | None = None,
) -> Iterator[None]:
    """Translate ``OSError`` raised inside the block into a ``FileUtilsError``.

    Permission problems always become ``PermissionDeniedError`` and an
    existing path becomes ``DestinationExistsError``. A missing path becomes
    ``missing`` when given. Anything else becomes ``fallback``, or propagates
    untouched when no fallback is given. The original error is chained.
    """
    try:
        yield
    except FileUtilsError:
        raise
    except OSError as err:
        cls: type[FileUtilsError] | None
        if isinstance(err, PermissionError):
            cls = PermissionDeniedError
        elif isinstance(err, FileExistsError):
            cls = DestinationExistsError
        elif isinstance(err, FileNotFoundError) and missing is not None:
            cls = missing
        else:
            cls = fallback
        if cls is None:
            raise
        raise cls.from_os_error(err) from err
