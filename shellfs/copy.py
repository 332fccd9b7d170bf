"""Recursive copy (``cp -r``).

Destination rules:

- If the destination exists, a file source is written into it (directory)
  or over it (file), and a directory source is nested inside it as
  ``destination/<source name>``, so ``cp_r("lib", "dist")`` yields
  ``dist/lib/...`` just like ``cp -r lib dist``.
- If the destination does not exist but its parent directory does, the
  copy goes into the parent under the destination's basename
  (copy-with-rename).
- Otherwise the original "not found" error for the destination is raised;
  missing parents are never created.
"""

from __future__ import annotations

import os

from .base import EntryKind, FileSystem, classify
from .config import CopyOptions
from .context import get_fs
from .dirs import make_dir
from .errors import CopyIntoSelfError, SelfCopyError
from .log import log_command
from .paths import absolutize, normalize


def _copy(
    fs: FileSystem,
    src: str,
    dst: str,
    rename: str | None,
    mode: int | None,
) -> None:
    src_meta = fs.stat(src)
    # Each level needs an existing container; directories are made by the caller.
    dst_meta = fs.stat(dst)

    name = rename or os.path.basename(src)

    if src_meta.is_dir:
        children = fs.list(src)
        target = os.path.join(dst, name)
        make_dir(fs, target, mode)
        for child in children:
            _copy(fs, os.path.join(src, child), target, None, mode)
    else:
        content = fs.read(src)
        if dst_meta.is_dir:
            fs.write(os.path.join(dst, name), content)
        else:
            fs.write(dst, content)


def cp_r(
    source: str,
    destination: str,
    options: CopyOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> None:
    """Copy a file or directory tree.

    Args:
        source: File or directory to copy.
        destination: Existing directory to copy into, existing file to
            overwrite, or a new name inside an existing directory.
        options: Rename, directory mode and logging options.
        fs: Storage backend. Defaults to the context backend.

    Raises:
        SelfCopyError: If source and destination normalize to the same path.
        CopyIntoSelfError: If the copy would land inside the source tree.
        FileNotFoundError: If the source is missing, or neither the
            destination nor its parent directory exists.
        CreationError: If a directory in the copy cannot be created.
    """
    opts = options or CopyOptions()
    if not opts.silent:
        log_command(f"cp -r {source} {destination}")

    src = normalize(source)
    dst = normalize(destination)
    if src == dst:
        raise SelfCopyError(src)

    fs = get_fs(fs)
    rename = opts.rename
    try:
        fs.stat(dst)
    except OSError:
        target = absolutize(dst, fs.getcwd())
        parent, name = os.path.split(target)
        if classify(fs, parent) is not EntryKind.DIRECTORY:
            raise
        dst, rename = parent, name

    # a directory copied below itself would keep finding its own copy
    root = absolutize(src, fs.getcwd())
    container = absolutize(dst, fs.getcwd())
    if container == root or container.startswith(root.rstrip(os.sep) + os.sep):
        raise CopyIntoSelfError(src, os.path.join(container, rename or os.path.basename(src)))

    _copy(fs, src, dst, rename, opts.mode)
