"""Configuration for shellfs operations.

Provides option dataclasses for the individual operations and the
connect_fs factory for choosing a storage backend.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from .base import FileSystem

# Permission bits for directories created by mkdir_p and cp_r.
DEFAULT_DIR_MODE = 0o755

# Number of candidate locations probed by the upward path search.
SEARCH_PROBE_LIMIT = 5

# File suffixes registered by watch() when no predicate is given.
DEFAULT_WATCH_SUFFIXES: tuple[str, ...] = (".js",)


@dataclass
class CopyOptions:
    """Options for cp_r.

    Attributes:
        rename: Basename for the top-level copy target. None keeps the
            source's basename. Never applied to nested entries.
        mode: Permission bits for directories the copy creates.
            None means DEFAULT_DIR_MODE.
        silent: Suppress the ``cp -r`` log line.
    """

    rename: str | None = None
    mode: int | None = None
    silent: bool = False


@dataclass
class RemoveOptions:
    """Options for rm_rf.

    Attributes:
        silent: Suppress the ``rm -rf`` log line.
    """

    silent: bool = False


@dataclass
class ListOptions:
    """Options for readdir_r.

    Attributes:
        format: "array" returns a list of paths, "string" joins them
            with newlines.
    """

    format: Literal["array", "string"] = "array"


@dataclass
class SearchOptions:
    """Options for the upward path search.

    Attributes:
        probe_limit: Maximum number of candidate locations to check.
        base_dir: Directory the search starts from. None means the
            backend's current working directory.
    """

    probe_limit: int = SEARCH_PROBE_LIMIT
    base_dir: str | None = None


@dataclass
class WatchOptions:
    """Options for watch.

    Attributes:
        suffixes: File name suffixes to register.
        predicate: Custom filter taking a file path. Overrides suffixes.
    """

    suffixes: tuple[str, ...] = DEFAULT_WATCH_SUFFIXES
    predicate: Callable[[str], bool] | None = None

    def accepts(self, path: str) -> bool:
        if self.predicate is not None:
            return self.predicate(path)
        return path.endswith(self.suffixes)


def connect_fs(
    type: Literal["local", "memory"] = "local",
    **kwargs,
) -> FileSystem:
    """Create a storage backend.

    Args:
        type: Backend type.
            - "local": The real filesystem of this process.
            - "memory": A fresh, empty in-memory filesystem.
        **kwargs: Additional configuration for the backend type.
            For type="memory":
                - cwd (str): Optional. Initial working directory, created
                  if missing (default: "/").

    Returns:
        A FileSystem instance.

    Examples:
        >>> connect_fs(type="memory", cwd="/work").getcwd()
        '/work'
    """
    from .local import LocalFS
    from .memory import MemoryFS

    if type == "local":
        if kwargs:
            raise ValueError(
                f"Unexpected arguments for local fs: {list(kwargs.keys())}"
            )
        return LocalFS()

    elif type == "memory":
        cwd = kwargs.pop("cwd", "/")
        if kwargs:
            raise ValueError(
                f"Unexpected arguments for memory fs: {list(kwargs.keys())}"
            )
        fs = MemoryFS()
        fs.makedirs(cwd)
        fs.chdir(cwd)
        return fs

    else:
        raise ValueError(
            f"Unsupported filesystem type: {type}. Use 'local' or 'memory'."
        )
