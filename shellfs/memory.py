"""In-memory storage backend."""

from __future__ import annotations

import errno as _errno
import posixpath
from datetime import datetime, timezone

from .base import FileMetadata


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryFS:
    """Simple in-memory filesystem.

    Stores files as ``bytes`` in a plain dict and directories in a dict
    of permission bits.  Implements the full ``FileSystem`` protocol, so
    every shellfs operation runs against it unchanged.

    Useful for testing and for sandboxes that must not touch the real disk.
    Unlike the real filesystem it has its own working directory, so
    ``chdir`` here never affects the process.
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.dirs: dict[str, int] = {"/": 0o755}
        self._mtimes: dict[str, str] = {"/": _now_iso()}
        self._cwd = "/"

    def read(self, path: str) -> bytes:
        path = self._resolve(path)
        if path in self.dirs:
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        if path not in self.files:
            raise FileNotFoundError(_errno.ENOENT, "No such file", path)
        return self.files[path]

    def write(self, path: str, content: bytes) -> None:
        if not isinstance(content, bytes):
            raise TypeError(f"Expected bytes, got {type(content).__name__}")
        path = self._resolve(path)
        if path in self.dirs:
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        self._check_parent(path)
        self.files[path] = content
        self._mtimes[path] = _now_iso()

    def stat(self, path: str) -> FileMetadata:
        path = self._resolve(path)
        if path in self.files:
            return FileMetadata(
                size=len(self.files[path]),
                modified_at=self._mtimes.get(path, ""),
            )
        if path in self.dirs:
            return FileMetadata(
                size=0,
                modified_at=self._mtimes.get(path, ""),
                is_dir=True,
                mode=self.dirs[path],
            )
        raise FileNotFoundError(_errno.ENOENT, "No such file or directory", path)

    def list(self, path: str = ".") -> list[str]:
        """List immediate children of a directory."""
        path = self._resolve(path)
        if path in self.files:
            raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", path)
        if path not in self.dirs:
            raise FileNotFoundError(_errno.ENOENT, "No such directory", path)
        prefix = path.rstrip("/") + "/"
        entries: set[str] = set()
        for f in self.files:
            if f.startswith(prefix):
                entries.add(f[len(prefix):].split("/")[0])
        for d in self.dirs:
            if d.startswith(prefix) and d != path:
                entries.add(d[len(prefix):].split("/")[0])
        return sorted(entries)

    def exists(self, path: str) -> bool:
        if not path:
            return False
        path = self._resolve(path)
        return path in self.files or path in self.dirs

    def isfile(self, path: str) -> bool:
        return bool(path) and self._resolve(path) in self.files

    def isdir(self, path: str) -> bool:
        return bool(path) and self._resolve(path) in self.dirs

    def mkdir(self, path: str, mode: int = 0o777) -> None:
        path = self._resolve(path)
        if path in self.dirs or path in self.files:
            raise FileExistsError(_errno.EEXIST, "File exists", path)
        self._check_parent(path)
        self.dirs[path] = mode & 0o777
        self._mtimes[path] = _now_iso()

    def makedirs(self, path: str) -> None:
        """Create a directory and any missing parents."""
        path = self._resolve(path)
        current = ""
        for part in path.strip("/").split("/"):
            if not part:
                continue
            current += "/" + part
            if current not in self.dirs:
                self.mkdir(current, 0o755)

    def rmdir(self, path: str) -> None:
        path = self._resolve(path)
        if path in self.files:
            raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", path)
        if path not in self.dirs:
            raise FileNotFoundError(_errno.ENOENT, "No such directory", path)
        if path == "/":
            raise PermissionError(_errno.EBUSY, "Cannot remove root", path)
        if self.list(path):
            raise OSError(_errno.ENOTEMPTY, "Directory not empty", path)
        del self.dirs[path]
        self._mtimes.pop(path, None)

    def remove(self, path: str) -> None:
        path = self._resolve(path)
        if path in self.dirs:
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        if path not in self.files:
            raise FileNotFoundError(_errno.ENOENT, "No such file", path)
        del self.files[path]
        self._mtimes.pop(path, None)

    def getcwd(self) -> str:
        return self._cwd

    def chdir(self, path: str) -> None:
        path = self._resolve(path)
        if path not in self.dirs:
            raise FileNotFoundError(_errno.ENOENT, "No such directory", path)
        self._cwd = path

    def _check_parent(self, path: str) -> None:
        parent = posixpath.dirname(path)
        if parent in self.files:
            raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", parent)
        if parent not in self.dirs:
            raise FileNotFoundError(_errno.ENOENT, "No such directory", parent)

    def _resolve(self, path: str) -> str:
        """Resolve a path relative to cwd and normalize . and .. components."""
        if not path:
            # like os.stat(""), the empty path names nothing
            raise FileNotFoundError(_errno.ENOENT, "No such file or directory", path)
        if not path.startswith("/"):
            path = self._cwd.rstrip("/") + "/" + path
        # normpath keeps a leading "//" (implementation-defined on POSIX)
        return "/" + posixpath.normpath(path).lstrip("/")
