"""Context variables for backend selection.

Every shellfs operation takes an optional ``fs`` argument; when it is
omitted the backend comes from the context variable managed here, and
falls back to a process-wide LocalFS.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Iterator

from .base import FileSystem
from .local import LocalFS

# Context variable holding the current backend
current_fs: contextvars.ContextVar[FileSystem | None] = contextvars.ContextVar(
    "shellfs_current_fs", default=None
)

_default_fs = LocalFS()


def get_fs(fs: FileSystem | None = None) -> FileSystem:
    """Return ``fs`` if given, else the context backend, else the real filesystem."""
    if fs is not None:
        return fs
    return current_fs.get() or _default_fs


@contextmanager
def use_fs(fs: FileSystem) -> Iterator[FileSystem]:
    """Route shellfs operations in the current context to ``fs``.

    Example::

        mem = MemoryFS()
        with use_fs(mem):
            mkdir_p("/build/out")
            cp_r("/src", "/build/out")
    """
    token = current_fs.set(fs)
    try:
        yield fs
    finally:
        current_fs.reset(token)


@contextmanager
def working_directory(path: str, fs: FileSystem | None = None) -> Iterator[str]:
    """Temporarily change the backend's working directory.

    The previous directory is restored on exit, even if the body raises.
    With LocalFS this changes the directory of the whole process, so it
    must not be used while other threads resolve relative paths.
    """
    fs = get_fs(fs)
    previous = fs.getcwd()
    fs.chdir(path)
    try:
        yield fs.getcwd()
    finally:
        fs.chdir(previous)
