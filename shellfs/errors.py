"""Exceptions raised by shellfs operations.

Missing paths are reported with the backend's own ``FileNotFoundError``;
the classes here cover the failures that have no builtin equivalent.
"""

from __future__ import annotations


class SelfCopyError(ValueError):
    """Source and destination of a copy are the same path."""

    def __init__(self, path: str):
        super().__init__(f"Cannot copy {path} to itself.")
        self.path = path


class DirectoryReadError(OSError):
    """The root of a recursive listing could not be read."""

    def __init__(self, path: str):
        super().__init__(f"Could not read path {path}")
        self.path = path


class CreationError(OSError):
    """Creating a directory failed for a reason other than it existing."""

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> CreationError:
        return cls(exc.errno, exc.strerror or str(exc), exc.filename or path)


class SearchExhausted(FileNotFoundError):
    """No candidate was found within the upward search bound."""

    def __init__(self, path: str):
        super().__init__(f'Path "{path}" not found')
        self.path = path


class CopyIntoSelfError(SelfCopyError):
    """The copy target lies inside the directory being copied."""

    def __init__(self, path: str, target: str):
        ValueError.__init__(self, f"Cannot copy {path} into itself, {target}.")
        self.path = path
        self.target = target
