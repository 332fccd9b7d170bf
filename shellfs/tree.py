"""Recursive listing (``find``) and best-effort recursive delete (``rm -rf``)."""

from __future__ import annotations

import enum
import os

from .base import EntryKind, FileSystem, classify
from .config import ListOptions, RemoveOptions
from .context import get_fs
from .errors import DirectoryReadError
from .log import log_command, logger
from .paths import normalize


class RemoveStatus(enum.Enum):
    """Outcome of rm_rf."""

    REMOVED = "removed"
    NOT_FOUND = "not_found"
    IGNORED = "ignored"


def _read_dir(fs: FileSystem, path: str) -> list[str]:
    root = normalize(path)
    try:
        names = fs.list(root)
    except OSError as exc:
        raise DirectoryReadError(root) from exc

    result = [root]
    for name in names:
        child = os.path.join(root, name)
        if fs.stat(child).is_dir:
            result.extend(_read_dir(fs, child))
        else:
            result.append(child)
    return result


def readdir_r(
    path: str,
    options: ListOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> list[str] | str:
    """List a directory and all of its descendants.

    The first entry is the normalized ``path`` itself, followed by every
    descendant in depth-first pre-order: a directory comes before its
    children, and siblings keep the backend's listing order.

    Args:
        path: Directory to list.
        options: ``ListOptions(format="string")`` joins the result with
            newlines instead of returning a list.
        fs: Storage backend. Defaults to the context backend.

    Raises:
        DirectoryReadError: If ``path`` cannot be listed.
    """
    opts = options or ListOptions()
    paths = _read_dir(get_fs(fs), path)
    return "\n".join(paths) if opts.format == "string" else paths


def _rm_dir(fs: FileSystem, path: str) -> None:
    root = normalize(path)
    for name in fs.list(root):
        child = os.path.join(root, name)
        if classify(fs, child) is EntryKind.DIRECTORY:
            _rm_dir(fs, child)
        else:
            fs.remove(child)
    fs.rmdir(root)


def rm_rf(
    path: str,
    options: RemoveOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> RemoveStatus:
    """Delete ``path`` and everything under it, never raising.

    Backend failures are swallowed and reported through the return value
    (and a debug log entry) instead.

    Returns:
        REMOVED when the tree was deleted, NOT_FOUND when nothing existed
        at ``path``, IGNORED when a failure was swallowed part way.
    """
    opts = options or RemoveOptions()
    if not opts.silent:
        log_command(f"rm -rf {path}")

    fs = get_fs(fs)
    try:
        meta = fs.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return RemoveStatus.NOT_FOUND
    except Exception as exc:
        logger.debug("rm -rf failure ignored", path=path, error=str(exc))
        return RemoveStatus.IGNORED

    try:
        if meta.is_dir:
            _rm_dir(fs, path)
        else:
            fs.remove(path)
    except Exception as exc:
        logger.debug("rm -rf failure ignored", path=path, error=str(exc))
        return RemoveStatus.IGNORED
    return RemoveStatus.REMOVED
