"""Tests for the storage backends (MemoryFS, LocalFS) against the shared contract."""

import os

import pytest

from shellfs import EntryKind, FileSystem, LocalFS, MemoryFS, classify


@pytest.fixture(params=["memory", "local"])
def backend(request, tmp_path):
    """Yield (fs, root) where root is an empty directory on that backend."""
    if request.param == "memory":
        fs = MemoryFS()
        fs.makedirs("/root")
        return fs, "/root"
    return LocalFS(), str(tmp_path)


class TestProtocol:
    def test_backends_satisfy_protocol(self):
        assert isinstance(MemoryFS(), FileSystem)
        assert isinstance(LocalFS(), FileSystem)


class TestReadWrite:
    """Test file content operations."""

    def test_write_and_read(self, backend):
        fs, root = backend
        path = os.path.join(root, "hello.txt")

        fs.write(path, b"hello world")

        assert fs.read(path) == b"hello world"
        assert fs.isfile(path) is True
        assert fs.isdir(path) is False

    def test_write_overwrites(self, backend):
        fs, root = backend
        path = os.path.join(root, "f")

        fs.write(path, b"long original content")
        fs.write(path, b"short")

        assert fs.read(path) == b"short"

    def test_write_requires_parent(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.write(os.path.join(root, "missing", "f"), b"x")

    def test_read_missing(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.read(os.path.join(root, "missing"))


class TestDirectories:
    """Test mkdir, list, rmdir and remove."""

    def test_mkdir_and_list(self, backend):
        fs, root = backend

        fs.mkdir(os.path.join(root, "d"))
        fs.write(os.path.join(root, "f"), b"")

        assert sorted(fs.list(root)) == ["d", "f"]
        assert fs.list(os.path.join(root, "d")) == []

    def test_mkdir_existing_raises(self, backend):
        fs, root = backend
        fs.mkdir(os.path.join(root, "d"))
        fs.write(os.path.join(root, "f"), b"")

        with pytest.raises(FileExistsError):
            fs.mkdir(os.path.join(root, "d"))
        with pytest.raises(FileExistsError):
            fs.mkdir(os.path.join(root, "f"))

    def test_mkdir_missing_parent_raises(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.mkdir(os.path.join(root, "a", "b"))

    def test_list_missing_raises(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.list(os.path.join(root, "missing"))

    def test_list_file_raises(self, backend):
        fs, root = backend
        path = os.path.join(root, "f")
        fs.write(path, b"")

        with pytest.raises(NotADirectoryError):
            fs.list(path)

    def test_rmdir_non_empty_raises(self, backend):
        fs, root = backend
        d = os.path.join(root, "d")
        fs.mkdir(d)
        fs.write(os.path.join(d, "f"), b"")

        with pytest.raises(OSError):
            fs.rmdir(d)
        assert fs.isdir(d)

    def test_rmdir_and_remove(self, backend):
        fs, root = backend
        d = os.path.join(root, "d")
        f = os.path.join(d, "f")
        fs.mkdir(d)
        fs.write(f, b"")

        fs.remove(f)
        fs.rmdir(d)

        assert fs.exists(d) is False

    def test_remove_directory_raises(self, backend):
        fs, root = backend
        d = os.path.join(root, "d")
        fs.mkdir(d)

        with pytest.raises(IsADirectoryError):
            fs.remove(d)


class TestStat:
    """Test metadata and classification."""

    def test_file_metadata(self, backend):
        fs, root = backend
        path = os.path.join(root, "f")
        fs.write(path, b"12345")

        meta = fs.stat(path)

        assert meta.size == 5
        assert meta.st_size == 5
        assert meta.is_file is True
        assert meta.is_dir is False
        assert meta.modified_at
        assert meta.st_mtime > 0

    def test_directory_metadata(self, backend):
        fs, root = backend
        d = os.path.join(root, "d")
        fs.mkdir(d, 0o700)

        meta = fs.stat(d)

        assert meta.is_dir is True
        assert meta.mode == 0o700
        assert oct(meta.st_mode).startswith("0o40")

    def test_stat_missing(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.stat(os.path.join(root, "missing"))

    def test_empty_path_names_nothing(self, backend):
        fs, root = backend

        with pytest.raises(FileNotFoundError):
            fs.stat("")
        with pytest.raises(FileNotFoundError):
            fs.list("")
        assert fs.exists("") is False
        assert fs.isdir("") is False

    def test_classify(self, backend):
        fs, root = backend
        fs.mkdir(os.path.join(root, "d"))
        fs.write(os.path.join(root, "f"), b"")

        assert classify(fs, os.path.join(root, "d")) is EntryKind.DIRECTORY
        assert classify(fs, os.path.join(root, "f")) is EntryKind.FILE
        assert classify(fs, os.path.join(root, "missing")) is EntryKind.MISSING


class TestMemoryFS:
    """Behaviour specific to the in-memory backend."""

    def test_relative_paths_use_own_cwd(self):
        fs = MemoryFS()
        fs.makedirs("/work")
        fs.chdir("/work")

        fs.write("notes.txt", b"n")

        assert fs.read("/work/notes.txt") == b"n"
        assert fs.getcwd() == "/work"

    def test_chdir_missing(self):
        fs = MemoryFS()

        with pytest.raises(FileNotFoundError):
            fs.chdir("/nope")

    def test_write_rejects_text(self):
        fs = MemoryFS()

        with pytest.raises(TypeError, match="Expected bytes"):
            fs.write("/f", "text")

    def test_root_cannot_be_removed(self):
        fs = MemoryFS()

        with pytest.raises(PermissionError):
            fs.rmdir("/")

    def test_parent_segments_are_resolved(self):
        fs = MemoryFS()
        fs.makedirs("/a/b")
        fs.write("/a/f", b"x")

        assert fs.read("/a/b/../f") == b"x"
        assert fs.exists("/a/./b") is True
