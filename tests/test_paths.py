"""Tests for the pure path helpers."""

import os

import pytest

from shellfs import absolute_prefix, absolutize, basedir, is_absolute, normalize


class TestIsAbsolute:
    @pytest.mark.parametrize(
        "path",
        ["/", "/usr/lib", "C:\\Windows", "c:\\"],
    )
    def test_absolute(self, path):
        assert is_absolute(path) is True

    @pytest.mark.parametrize(
        "path",
        ["", ".", "lib/x.js", "./x", "../x", "C:relative", "C:/forward"],
    )
    def test_relative(self, path):
        assert is_absolute(path) is False

    def test_prefix(self):
        """The matched root is returned, not just a flag."""
        assert absolute_prefix("/usr/lib") == "/"
        assert absolute_prefix("D:\\data") == "D:\\"
        assert absolute_prefix("usr/lib") is None


class TestNormalize:
    def test_collapses_separators_and_dots(self):
        assert normalize("a//b/./c/") == "a/b/c"

    def test_resolves_parent_segments(self):
        assert normalize("/a/b/../c") == "/a/c"

    def test_keeps_leading_parent_segments(self):
        assert normalize("../a/./b") == "../a/b"

    def test_preserves_absolute_vs_relative(self):
        assert normalize("/a").startswith("/")
        assert not normalize("a").startswith("/")

    def test_double_leading_slash(self):
        assert normalize("//a/b") == "/a/b"

    def test_empty(self):
        assert normalize("") == "."


class TestAbsolutize:
    def test_absolute_unchanged(self):
        assert absolutize("/x/y", "/base") == "/x/y"

    def test_relative_joined_to_cwd(self):
        assert absolutize("a/b", "/base") == "/base/a/b"

    def test_relative_with_parent_segments(self):
        assert absolutize("../a", "/base/sub") == "/base/a"

    def test_defaults_to_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert absolutize("f.txt") == os.path.join(os.getcwd(), "f.txt")


class TestBasedir:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("src/lib/*.js", "src/lib/"),
            ("src/*/index.js", "src/"),
            ("*.js", "./"),
            ("/a/b/**/c.js", "/a/b/"),
            ("src/lib/file.js", "src/lib/"),
            ("C:\\proj\\*.js", "C:\\proj\\"),
            ("mixed\\dir/*.js", "mixed\\dir/"),
            ("", "./"),
            (None, "./"),
        ],
    )
    def test_basedir(self, pattern, expected):
        assert basedir(pattern) == expected
