"""Entry point: python -m fileutils"""

from __future__ import annotations

import argparse
import errno
import os
import sys

from fileutils.copy import cp_with_options
from fileutils.infrastructure.logger import install_exception_hooks, logger, setup_logging
from fileutils.permissions import chmod_r, chown_r
from fileutils.shell import mkdir_p, mv, rm, rm_rf, which
from fileutils.types import CopyOptions


def _octal_mode(value: str) -> int:
    try:
        return int(value, 8)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid octal mode: {value!r}") from None


def _owner(value: str) -> tuple[int, int]:
    """Parse ``UID:GID``; an empty part leaves that id unchanged (-1)."""
    uid_part, sep, gid_part = value.partition(":")
    try:
        uid = int(uid_part) if uid_part else -1
        gid = int(gid_part) if sep and gid_part else -1
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid owner (expected UID:GID): {value!r}") from None
    return uid, gid


def _remove(path: str, *, recursive: bool, force: bool) -> None:
    """``rm``, ``rm -r``, ``rm -f`` and ``rm -rf``: only -f tolerates a missing path."""
    if not os.path.lexists(path):
        if force:
            return
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if recursive:
        rm_rf(path)
    else:
        rm(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fileutils", description="Recursive file operations")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $FILEUTILS_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cp_parser = sub.add_parser("cp", help="Copy files and directories")
    cp_parser.add_argument("-R", "-r", dest="recursive", action="store_true", help="Copy directories recursively")
    cp_parser.add_argument("-P", dest="preserve_links", action="store_true", help="Copy symlinks as symlinks")
    cp_parser.add_argument("-p", dest="preserve_timestamps", action="store_true", help="Preserve modification times")
    cp_parser.add_argument("source")
    cp_parser.add_argument("dest")

    chmod_parser = sub.add_parser("chmod", help="Change permissions recursively")
    chmod_parser.add_argument("-R", dest="recursive", action="store_true", required=True)
    chmod_parser.add_argument("mode", type=_octal_mode)
    chmod_parser.add_argument("path")

    chown_parser = sub.add_parser("chown", help="Change ownership recursively")
    chown_parser.add_argument("-R", dest="recursive", action="store_true", required=True)
    chown_parser.add_argument("owner", type=_owner)
    chown_parser.add_argument("path")

    mkdir_parser = sub.add_parser("mkdir", help="Create a directory and its parents")
    mkdir_parser.add_argument("-p", dest="parents", action="store_true", required=True)
    mkdir_parser.add_argument("-m", dest="mode", type=_octal_mode, default=0o777)
    mkdir_parser.add_argument("path")

    mv_parser = sub.add_parser("mv", help="Move or rename a path")
    mv_parser.add_argument("old")
    mv_parser.add_argument("new")

    rm_parser = sub.add_parser("rm", help="Remove a path")
    rm_parser.add_argument("-r", "-R", dest="recursive", action="store_true")
    rm_parser.add_argument("-f", dest="force", action="store_true")
    rm_parser.add_argument("path")

    which_parser = sub.add_parser("which", help="Locate an executable on PATH")
    which_parser.add_argument("name")

    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and run one command. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "cp":
            options = CopyOptions(
                recursive=args.recursive,
                preserve_links=args.preserve_links,
                preserve_timestamps=args.preserve_timestamps,
            )
            cp_with_options(args.source, args.dest, options)
        elif args.command == "chmod":
            chmod_r(args.path, args.mode)
        elif args.command == "chown":
            uid, gid = args.owner
            chown_r(args.path, uid, gid)
        elif args.command == "mkdir":
            mkdir_p(args.path, args.mode)
        elif args.command == "mv":
            mv(args.old, args.new)
        elif args.command == "rm":
            _remove(args.path, recursive=args.recursive, force=args.force)
        elif args.command == "which":
            print(which(args.name))
    except OSError as err:
        logger.debug("Command failed", command=args.command, error=str(err))
        print(f"fileutils: {err}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    install_exception_hooks()
    sys.exit(run())


if __name__ == "__main__":
    main()
