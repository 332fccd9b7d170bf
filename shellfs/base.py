"""Base storage backend interface and dataclasses.

Defines the common interface for storage backends (LocalFS, MemoryFS) and
the entry classification used by the tree operations.
"""

from __future__ import annotations

import enum
import stat as stat_mod
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@dataclass
class FileMetadata:
    """Metadata for a single file or directory.

    Attributes:
        size: File size in bytes (0 for directories).
        modified_at: ISO 8601 timestamp when last modified (UTC).
        is_dir: True if this is a directory, False for files.
        mode: Permission bits (without the file type bits).
    """

    size: int
    modified_at: str
    is_dir: bool = False
    mode: int = 0o644

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    # os.stat_result-compatible properties

    @property
    def st_size(self) -> int:
        return self.size

    @property
    def st_mode(self) -> int:
        kind = stat_mod.S_IFDIR if self.is_dir else stat_mod.S_IFREG
        return kind | self.mode

    @property
    def st_mtime(self) -> float:
        try:
            return datetime.fromisoformat(self.modified_at).timestamp()
        except ValueError:
            return 0.0


class EntryKind(enum.Enum):
    """What a path resolves to at the moment it is queried."""

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"


@runtime_checkable
class FileSystem(Protocol):
    """Storage backend used by every shellfs operation.

    Errors follow the builtin ``OSError`` hierarchy: ``FileNotFoundError``
    for missing paths, ``FileExistsError`` when ``mkdir`` finds something
    already there, ``NotADirectoryError`` when listing a file.
    """

    def stat(self, path: str) -> FileMetadata:
        """Get file metadata."""
        ...

    def list(self, path: str = ".") -> list[str]:
        """List immediate children of a directory (names only)."""
        ...

    def read(self, path: str) -> bytes:
        """Read entire file as bytes."""
        ...

    def write(self, path: str, content: bytes) -> None:
        """Write bytes to a file, replacing any existing content."""
        ...

    def mkdir(self, path: str, mode: int = 0o777) -> None:
        """Create a single directory."""
        ...

    def remove(self, path: str) -> None:
        """Remove a file."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def isfile(self, path: str) -> bool:
        """Check if path is a file."""
        ...

    def isdir(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def getcwd(self) -> str:
        """Get current working directory."""
        ...

    def chdir(self, path: str) -> None:
        """Change current working directory."""
        ...


def classify(fs: FileSystem, path: str) -> EntryKind:
    """Classify ``path`` against the live state of ``fs``.

    Missing paths and paths that cannot be stat-ed both classify as
    ``EntryKind.MISSING``.
    """
    try:
        meta = fs.stat(path)
    except OSError:
        return EntryKind.MISSING
    return EntryKind.DIRECTORY if meta.is_dir else EntryKind.FILE
