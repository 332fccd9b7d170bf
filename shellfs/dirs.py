"""Idempotent directory creation (``mkdir -p``)."""

from __future__ import annotations

import os
import re

from .base import FileSystem
from .config import DEFAULT_DIR_MODE
from .context import get_fs
from .errors import CreationError
from .paths import normalize

_DRIVE_RE = re.compile(r"^[A-Za-z]+:")


def make_dir(fs: FileSystem, path: str, mode: int | None = None) -> bool:
    """Create one directory, treating "already exists" as success.

    Returns:
        True if the directory was created, False if something already
        existed at ``path``.

    Raises:
        CreationError: For any other failure, chained to the backend error.
    """
    try:
        fs.mkdir(path, DEFAULT_DIR_MODE if mode is None else mode)
    except FileExistsError:
        return False
    except OSError as exc:
        raise CreationError.from_os_error(exc, path) from exc
    return True


def mkdir_p(path: str, mode: int | None = None, *, fs: FileSystem | None = None) -> None:
    """Create ``path`` and every missing parent, left to right.

    A leading root ("/") or drive ("C:") seeds the path. ``..`` segments
    are appended as-is, without creating anything. The first creation
    failure that is not "already exists" aborts the remaining segments.

    Args:
        path: Directory to create.
        mode: Permission bits for created directories (default 0o755).
        fs: Storage backend. Defaults to the context backend.

    Raises:
        CreationError: If a segment cannot be created.
    """
    fs = get_fs(fs)
    segments = re.split(r"[\\/]", normalize(path))

    current = ""
    if segments[0] == "":
        current = "/"
        segments = segments[1:]
    elif _DRIVE_RE.match(segments[0]):
        current = segments[0] + os.sep
        segments = segments[1:]

    for segment in segments:
        if not segment:
            continue
        current = os.path.join(current, segment) if current else segment
        if segment == "..":
            continue
        make_dir(fs, current, mode)
