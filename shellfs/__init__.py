"""shellfs: shell-style filesystem utilities (cp -r, rm -rf, mkdir -p) as a library."""

from .base import EntryKind, FileMetadata, FileSystem, classify
from .config import (
    DEFAULT_DIR_MODE,
    DEFAULT_WATCH_SUFFIXES,
    SEARCH_PROBE_LIMIT,
    CopyOptions,
    ListOptions,
    RemoveOptions,
    SearchOptions,
    WatchOptions,
    connect_fs,
)
from .context import current_fs, get_fs, use_fs, working_directory
from .copy import cp_r
from .dirs import make_dir, mkdir_p
from .errors import (
    CopyIntoSelfError,
    CreationError,
    DirectoryReadError,
    SearchExhausted,
    SelfCopyError,
)
from .local import LocalFS
from .log import log_command, setup_logging
from .memory import MemoryFS
from .paths import absolute_prefix, absolutize, basedir, is_absolute, normalize
from .search import exists, find_parent_path, search_parent_path
from .tree import RemoveStatus, readdir_r, rm_rf
from .watcher import Watcher, stop_watching, watch

__all__ = [
    "absolute_prefix",
    "absolutize",
    "basedir",
    "classify",
    "connect_fs",
    "CopyIntoSelfError",
    "CopyOptions",
    "cp_r",
    "CreationError",
    "current_fs",
    "DEFAULT_DIR_MODE",
    "DEFAULT_WATCH_SUFFIXES",
    "DirectoryReadError",
    "EntryKind",
    "exists",
    "FileMetadata",
    "FileSystem",
    "find_parent_path",
    "get_fs",
    "is_absolute",
    "ListOptions",
    "LocalFS",
    "log_command",
    "make_dir",
    "MemoryFS",
    "mkdir_p",
    "normalize",
    "readdir_r",
    "RemoveOptions",
    "RemoveStatus",
    "rm_rf",
    "SEARCH_PROBE_LIMIT",
    "search_parent_path",
    "SearchExhausted",
    "SearchOptions",
    "SelfCopyError",
    "setup_logging",
    "stop_watching",
    "use_fs",
    "watch",
    "WatchOptions",
    "Watcher",
    "working_directory",
]
