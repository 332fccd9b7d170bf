"""Bounded upward search for a named path.

Candidates are computed from an absolute base directory by joining
``..`` segments, so the search never changes any working directory.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from .base import FileSystem
from .config import SearchOptions
from .context import get_fs
from .errors import SearchExhausted
from .paths import absolutize, normalize

SearchCallback = Callable[[Exception | None, str | None], None]


def exists(path: str, *, fs: FileSystem | None = None) -> bool:
    """Check whether anything exists at ``path``."""
    return get_fs(fs).exists(path)


def candidate_paths(location: str, base_dir: str, probe_limit: int) -> list[str]:
    """Return the paths probed for ``location``, nearest first.

    >>> candidate_paths("config", "/a/b/c", 3)
    ['/a/b/c/config', '/a/b/config', '/a/config']
    """
    return [
        normalize(os.path.join(base_dir, *([os.pardir] * level), location))
        for level in range(probe_limit)
    ]


def find_parent_path(
    location: str,
    options: SearchOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> str:
    """Find ``location`` in the base directory or one of its ancestors.

    Args:
        location: Relative path to look for.
        options: Probe limit and base directory (default: backend cwd).
        fs: Storage backend. Defaults to the context backend.

    Returns:
        Absolute path of the nearest existing candidate.

    Raises:
        ValueError: If ``location`` is empty.
        SearchExhausted: If no candidate exists; names the last one probed.
    """
    if not location:
        raise ValueError("location must not be empty")
    opts = options or SearchOptions()
    if opts.probe_limit < 1:
        raise ValueError(f"probe_limit must be at least 1, got {opts.probe_limit}")

    fs = get_fs(fs)
    base_dir = absolutize(opts.base_dir or fs.getcwd(), fs.getcwd())

    candidate = location
    for candidate in candidate_paths(location, base_dir, opts.probe_limit):
        if fs.exists(candidate):
            return candidate
    raise SearchExhausted(candidate)


def search_parent_path(
    location: str | None,
    callback: SearchCallback,
    options: SearchOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> None:
    """Callback form of find_parent_path.

    Calls ``callback(None, path)`` when found and ``callback(error, None)``
    when the search is exhausted. Does nothing, not even calling
    ``callback``, when ``location`` is empty.
    """
    if not location:
        return
    try:
        found = find_parent_path(location, options, fs=fs)
    except Exception as exc:
        callback(exc, None)
        return
    callback(None, found)
