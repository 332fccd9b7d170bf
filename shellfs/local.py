"""Storage backend for the real filesystem.

Thin wrapper over ``os`` and ``pathlib`` that reports metadata in the
shared ``FileMetadata`` shape and raises the builtin ``OSError`` subclasses
unchanged.
"""

from __future__ import annotations

import os
import stat as stat_mod
from datetime import datetime, timezone
from pathlib import Path

from .base import FileMetadata


class LocalFS:
    """FileSystem interface over the host filesystem.

    Relative paths resolve against the process working directory, so
    ``chdir`` on this backend changes it for the whole process.
    """

    # -------------------------------------------------------------------------
    # Working Directory
    # -------------------------------------------------------------------------

    def getcwd(self) -> str:
        """Get the process working directory."""
        return os.getcwd()

    def chdir(self, path: str) -> None:
        """Change the process working directory.

        Raises:
            FileNotFoundError: If directory doesn't exist.
            NotADirectoryError: If path is a file.
        """
        os.chdir(path)

    # -------------------------------------------------------------------------
    # Files and directories
    # -------------------------------------------------------------------------

    def read(self, path: str) -> bytes:
        """Read entire file as bytes."""
        return Path(path).read_bytes()

    def write(self, path: str, content: bytes) -> None:
        """Write bytes to a file, replacing existing content.

        The parent directory must already exist.
        """
        Path(path).write_bytes(content)

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        return os.path.exists(path)

    def isfile(self, path: str) -> bool:
        """Check if path is a file."""
        return os.path.isfile(path)

    def isdir(self, path: str) -> bool:
        """Check if path is a directory."""
        return os.path.isdir(path)

    def list(self, path: str = ".") -> list[str]:
        """List directory contents in the order the OS returns them."""
        return os.listdir(path)

    def mkdir(self, path: str, mode: int = 0o777) -> None:
        """Create a single directory (subject to the process umask)."""
        os.mkdir(path, mode)

    def remove(self, path: str) -> None:
        """Remove a file."""
        if os.path.isdir(path) and not os.path.islink(path):
            raise IsADirectoryError(f"Is a directory: '{path}'")
        os.unlink(path)

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        os.rmdir(path)

    def stat(self, path: str) -> FileMetadata:
        """Get file metadata."""
        st = os.stat(path)
        is_dir = stat_mod.S_ISDIR(st.st_mode)
        return FileMetadata(
            size=0 if is_dir else st.st_size,
            modified_at=datetime.fromtimestamp(
                st.st_mtime, tz=timezone.utc
            ).isoformat(),
            is_dir=is_dir,
            mode=stat_mod.S_IMODE(st.st_mode),
        )
