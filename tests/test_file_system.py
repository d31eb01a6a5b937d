from pathlib import Path

import pytest

from bulk_renamer.core import directory_exists, get_files, move_file, parse_extension_filter


class TestParseExtensionFilter:
    def test_tokens_are_normalised(self):
        assert parse_extension_filter(" fbx, .PNG ,,Fbx") == [".fbx", ".png"]

    def test_empty(self):
        assert parse_extension_filter("") == []
        assert parse_extension_filter(" , ") == []


class TestGetFiles:
    def test_recursive(self, tmp_path: Path, make_files):
        make_files(["a.fbx", "sub/b.fbx", "sub/deeper/c.txt"])
        names = sorted(Path(p).name for p in get_files(str(tmp_path)))
        assert names == ["a.fbx", "b.fbx", "c.txt"]

    def test_top_level_only(self, tmp_path: Path, make_files):
        make_files(["a.fbx", "sub/b.fbx"])
        files = get_files(str(tmp_path), include_subfolders=False)
        assert [Path(p).name for p in files] == ["a.fbx"]

    def test_extension_filter_is_case_insensitive(self, tmp_path: Path, make_files):
        make_files(["a.FBX", "b.png", "c.txt", "sub/d.fbx"])
        names = sorted(Path(p).name for p in get_files(str(tmp_path), extension_filter="fbx, .PNG"))
        assert names == ["a.FBX", "b.png", "d.fbx"]

    def test_paths_are_absolute(self, tmp_path: Path, make_files):
        make_files(["a.txt"])
        assert all(Path(p).is_absolute() for p in get_files(str(tmp_path)))

    def test_missing_folder(self, tmp_path: Path):
        assert get_files(str(tmp_path / "nope")) == []
        assert not directory_exists(str(tmp_path / "nope"))
        assert not directory_exists("")
        assert directory_exists(str(tmp_path))


class TestMoveFile:
    def test_move(self, tmp_path: Path, make_files):
        src, = make_files(["a.txt"])
        dst = str(tmp_path / "b.txt")
        move_file(src, dst)
        assert Path(dst).exists()
        assert not Path(src).exists()

    def test_refuses_to_overwrite(self, tmp_path: Path, make_files):
        src, dst = make_files(["a.txt", "b.txt"])
        with pytest.raises(FileExistsError):
            move_file(src, dst)
        assert Path(dst).read_text(encoding="utf-8") == "b.txt"

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            move_file(str(tmp_path / "missing.txt"), str(tmp_path / "x.txt"))
