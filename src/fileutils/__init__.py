"""Recursive file operations named after the shell utilities they mirror."""

from __future__ import annotations

from .copy import cp, cp_follow_links, cp_preserve_links, cp_r, cp_with_options
from .errors import (
    CopyIOError,
    DestinationExistsError,
    ExecutableNotFoundError,
    FileUtilsError,
    LinkReadError,
    NotADirectoryOperationError,
    PermissionDeniedError,
    SourceNotFoundError,
)
from .permissions import chmod_r, chown_r, walk_tree
from .shell import mkdir_p, mv, rm, rm_rf, which
from .types import CopyOptions

__all__ = [
    # copy
    "cp",
    "cp_follow_links",
    "cp_preserve_links",
    "cp_r",
    "cp_with_options",
    # errors
    "CopyIOError",
    "DestinationExistsError",
    "ExecutableNotFoundError",
    "FileUtilsError",
    "LinkReadError",
    "NotADirectoryOperationError",
    "PermissionDeniedError",
    "SourceNotFoundError",
    # permissions
    "chmod_r",
    "chown_r",
    "walk_tree",
    # shell
    "mkdir_p",
    "mv",
    "rm",
    "rm_rf",
    "which",
    # types
    "CopyOptions",
]
