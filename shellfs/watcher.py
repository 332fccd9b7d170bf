"""Recursive registration of file-change callbacks.

The tree is walked through the storage backend; change notification comes
from a watchdog observer. Each directory holding a registered file gets a
single non-recursive watch, and events are routed to the callbacks of the
file they name.
"""

from __future__ import annotations

import contextlib
import os
import threading
from collections.abc import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver, ObservedWatch

from .base import FileMetadata, FileSystem
from .config import WatchOptions
from .context import get_fs
from .log import logger
from .paths import absolutize, normalize

ChangeCallback = Callable[[str], None]

_CHANGE_EVENTS = ("modified", "created", "moved")


class _DirectoryHandler(FileSystemEventHandler):
    """Forwards file events from one watched directory to the Watcher."""

    def __init__(self, watcher: Watcher):
        super().__init__()
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _CHANGE_EVENTS:
            return
        if event.event_type == "moved":
            self._watcher.dispatch(os.fsdecode(event.dest_path))
        else:
            self._watcher.dispatch(os.fsdecode(event.src_path))


class Watcher:
    """Registry of change callbacks backed by a watchdog observer.

    The observer is started on the first registration and runs callbacks
    on its own thread.
    """

    def __init__(self, observer: BaseObserver | None = None):
        """Initialize the watcher.

        Args:
            observer: Observer to schedule directory watches on. Defaults
                to a daemon watchdog Observer.
        """
        if observer is None:
            observer = Observer()
            observer.daemon = True
        self._observer = observer
        self._started = False
        self._lock = threading.Lock()
        self._callbacks: dict[str, list[ChangeCallback]] = {}
        self._watches: dict[str, ObservedWatch] = {}
        self._handler = _DirectoryHandler(self)

    @property
    def watched_files(self) -> list[str]:
        with self._lock:
            return sorted(self._callbacks)

    def watch(
        self,
        path: str,
        callback: ChangeCallback,
        options: WatchOptions | None = None,
        *,
        fs: FileSystem | None = None,
    ) -> list[str]:
        """Register ``callback`` on every matching file under ``path``.

        Directories are descended into but never watched themselves. If
        ``path`` cannot be stat-ed nothing is registered. A directory that
        cannot be listed is logged and skipped along with its subtree, and
        a file whose directory cannot be scheduled on the observer is logged
        and left unregistered. Nothing is raised to the caller.

        The walk runs on the calling thread and blocks until the whole tree
        has been stat-ed and listed; only the callbacks run on the observer
        thread.

        Args:
            path: File or directory to watch.
            callback: Called with the file path whenever it changes.
            options: Suffix filter or predicate (default: ``.js`` files).
            fs: Storage backend used for the walk.

        Returns:
            The files registered by this call.
        """
        opts = options or WatchOptions()
        fs = get_fs(fs)
        try:
            meta = fs.stat(path)
        except OSError:
            return []

        registered: list[str] = []
        self._descend(fs, normalize(path), meta, callback, opts, registered)
        return registered

    def _descend(
        self,
        fs: FileSystem,
        path: str,
        meta: FileMetadata,
        callback: ChangeCallback,
        opts: WatchOptions,
        registered: list[str],
    ) -> None:
        if not meta.is_dir:
            if opts.accepts(path):
                key = self._register(fs, path, callback)
                if key is not None:
                    registered.append(key)
            return

        try:
            names = fs.list(path)
        except OSError as exc:
            logger.critical("Watch listing failed", path=path, error=str(exc))
            return

        for name in names:
            child = os.path.join(path, name)
            try:
                child_meta = fs.stat(child)
            except OSError:
                continue
            self._descend(fs, child, child_meta, callback, opts, registered)

    def _register(
        self, fs: FileSystem, path: str, callback: ChangeCallback
    ) -> str | None:
        key = absolutize(path, fs.getcwd())
        directory = os.path.dirname(key)
        with self._lock:
            scheduled = None
            try:
                if directory not in self._watches:
                    scheduled = self._observer.schedule(
                        self._handler, directory, recursive=False
                    )
                    self._watches[directory] = scheduled
                if not self._started:
                    self._observer.start()
                    self._started = True
            except OSError as exc:
                logger.critical("Watch scheduling failed", path=key, error=str(exc))
                if scheduled is not None:
                    del self._watches[directory]
                    with contextlib.suppress(KeyError, OSError):
                        self._observer.unschedule(scheduled)
                return None
            self._callbacks.setdefault(key, []).append(callback)
        return key

    def dispatch(self, path: str) -> None:
        """Invoke the callbacks registered for ``path``, if any."""
        key = normalize(absolutize(path))
        with self._lock:
            callbacks = list(self._callbacks.get(key, ()))
        for callback in callbacks:
            try:
                callback(key)
            except Exception:
                logger.exception("Watch callback failed", path=key)

    def unwatch(self, path: str, *, fs: FileSystem | None = None) -> None:
        """Drop every callback registered for the file at ``path``."""
        key = absolutize(normalize(path), get_fs(fs).getcwd())
        directory = os.path.dirname(key)
        with self._lock:
            if self._callbacks.pop(key, None) is None:
                return
            still_used = any(os.path.dirname(f) == directory for f in self._callbacks)
            watch = self._watches.pop(directory) if not still_used else None
            if watch is not None:
                self._observer.unschedule(watch)

    def stop(self) -> None:
        """Stop the observer and forget every registration.

        Observer threads cannot be restarted, so a stopped Watcher must
        not be reused.
        """
        with self._lock:
            self._callbacks.clear()
            self._watches.clear()
            started, self._started = self._started, False
        if started:
            self._observer.stop()
            self._observer.join(timeout=2.0)


_LOCK = threading.Lock()
_default_watcher: Watcher | None = None


def watch(
    path: str,
    callback: ChangeCallback,
    options: WatchOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> list[str]:
    """Register ``callback`` on matching files under ``path``.

    Uses a process-wide Watcher created on first use.
    """
    global _default_watcher
    with _LOCK:
        if _default_watcher is None:
            _default_watcher = Watcher()
        watcher = _default_watcher
    return watcher.watch(path, callback, options, fs=fs)


def stop_watching() -> None:
    """Stop the process-wide Watcher. Safe to call multiple times."""
    global _default_watcher
    with _LOCK:
        watcher, _default_watcher = _default_watcher, None
    if watcher is not None:
        watcher.stop()
