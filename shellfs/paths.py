"""Pure path helpers. Nothing here touches a filesystem."""

from __future__ import annotations

import os
import re

_ABSOLUTE_RE = re.compile(r"^[A-Za-z]+:\\|^/")
_SEPARATOR_RE = re.compile(r"[\\/]")


def absolute_prefix(path: str) -> str | None:
    """Return the root a path starts with ("/" or a drive like "C:\\"), or None."""
    match = _ABSOLUTE_RE.match(path)
    return match.group(0) if match else None


def is_absolute(path: str) -> bool:
    """Check for a POSIX root or a Windows drive prefix, regardless of host OS."""
    return absolute_prefix(path) is not None


def normalize(path: str) -> str:
    """Collapse redundant separators and ``.``/``..`` segments.

    Absolute paths stay absolute and relative paths stay relative;
    an empty path normalizes to ".".
    """
    normalized = os.path.normpath(path) if path else "."
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def absolutize(path: str, cwd: str | None = None) -> str:
    """Return ``path`` unchanged if absolute, else joined onto ``cwd``.

    Args:
        path: Path to make absolute.
        cwd: Base directory. Defaults to the process working directory.
    """
    if is_absolute(path):
        return path
    return normalize(os.path.join(cwd if cwd is not None else os.getcwd(), path))


def basedir(pattern: str | None) -> str:
    """Return the literal directory prefix of a glob-like pattern.

    Leading segments are kept, with their original separators, up to the
    first one containing a ``*``. The last segment is never part of the
    result.

    Examples:
        >>> basedir("src/lib/*.js")
        'src/lib/'
        >>> basedir("src/*/index.js")
        'src/'
        >>> basedir("*.js")
        './'
    """
    pattern = pattern or ""
    prefix = ""
    pos = 0
    for part in _SEPARATOR_RE.split(pattern)[:-1]:
        if "*" in part:
            break
        pos += len(part) + 1
        prefix += part + pattern[pos - 1]
    return prefix or "./"
