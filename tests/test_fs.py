"""Unit tests for the filesystem capability (nextkit.fs)."""

from __future__ import annotations

import pytest

from nextkit.errors import InputError
from nextkit.fs import LocalFileSystem, join, project_relative

pytestmark = pytest.mark.unit


class TestJoin:
    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            (("", "hooks"), "hooks"),
            (("src", "app", "api"), "src/app/api"),
            (("src/", "/lib"), "src/lib"),
            (("", ""), ""),
        ],
    )
    def test_join(self, parts, expected):
        assert join(*parts) == expected


class TestProjectRelative:
    @pytest.mark.parametrize(("raw", "expected"), [("components/ui", "components/ui"), (" config/.env ", "config/.env")])
    def test_accepts_relative_paths(self, raw, expected):
        assert project_relative(raw, "Path") == expected

    @pytest.mark.parametrize("raw", ["/etc", "../up", "a/../../b"])
    def test_rejects_escaping_paths(self, raw):
        with pytest.raises(InputError, match="Path must live inside the project"):
            project_relative(raw, "Path")


class TestLocalFileSystem:
    def test_make_dirs_is_idempotent(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        fs.make_dirs("a/b")
        fs.make_dirs("a/b")
        assert fs.is_dir("a/b")
        assert (tmp_path / "a" / "b").is_dir()

    def test_write_read_append(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        fs.write_text("notes.txt", "one\n")
        fs.append_text("notes.txt", "two\n")
        assert fs.read_text("notes.txt") == "one\ntwo\n"
        assert fs.is_file("notes.txt")
        assert not fs.is_dir("notes.txt")

    def test_root_is_empty_path(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        assert fs.resolve("") == tmp_path
        assert fs.is_dir("")

    def test_list_dir(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        fs.make_dirs("store/slices")
        fs.write_text("store/slices/userSlice.ts", "")
        fs.write_text("store/slices/generalSlice.ts", "")
        assert fs.list_dir("store/slices") == ["generalSlice.ts", "userSlice.ts"]
        assert fs.list_dir("missing") == []

    def test_write_without_parent_fails(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        with pytest.raises(FileNotFoundError):
            fs.write_text("nowhere/file.ts", "x")

    def test_make_dirs_over_file_fails(self, tmp_path):
        fs = LocalFileSystem(tmp_path)
        fs.write_text("lib", "")
        with pytest.raises(FileExistsError):
            fs.make_dirs("lib")
