"""Unit tests for entrypoint location."""

from pathlib import Path

import pytest

from roche.exceptions import EntrypointNotFoundError
from roche.lib.workspace import locate_build_entrypoint, require_library_file


class TestLocateBuildEntrypoint:
    """Tests for locate_build_entrypoint()."""

    def test_found_in_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / "functions.rs").write_text("")
        monkeypatch.chdir(tmp_path)

        assert locate_build_entrypoint() == tmp_path
        assert Path.cwd() == tmp_path

    def test_found_in_src_changes_directory(self, tmp_path, monkeypatch):
        src = tmp_path / "src"
        src.mkdir()
        (src / "functions.rs").write_text("")
        monkeypatch.chdir(tmp_path)

        assert locate_build_entrypoint() == src
        assert Path.cwd() == src

    def test_current_directory_preferred_over_src(self, tmp_path, monkeypatch):
        src = tmp_path / "src"
        src.mkdir()
        (tmp_path / "functions.rs").write_text("")
        (src / "functions.rs").write_text("")
        monkeypatch.chdir(tmp_path)

        assert locate_build_entrypoint() == tmp_path

    def test_missing_everywhere(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(EntrypointNotFoundError, match="Cannot find functions.rs"):
            locate_build_entrypoint()

        assert Path.cwd() == tmp_path

    def test_directory_named_like_entrypoint_does_not_count(self, tmp_path, monkeypatch):
        (tmp_path / "functions.rs").mkdir()
        monkeypatch.chdir(tmp_path)

        with pytest.raises(EntrypointNotFoundError):
            locate_build_entrypoint()

    def test_all_required_files_must_be_together(self, tmp_path, monkeypatch):
        src = tmp_path / "src"
        src.mkdir()
        (tmp_path / "functions.rs").write_text("")
        (src / "lib.rs").write_text("")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(EntrypointNotFoundError) as exc_info:
            locate_build_entrypoint({"functions.rs", "lib.rs"})

        assert exc_info.value.filenames == ["functions.rs", "lib.rs"]


class TestRequireLibraryFile:
    """Tests for require_library_file()."""

    def test_present(self, tmp_path, monkeypatch):
        (tmp_path / "lib.rs").write_text("")
        monkeypatch.chdir(tmp_path)

        assert require_library_file() == tmp_path / "lib.rs"

    def test_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(EntrypointNotFoundError, match="Cannot find lib.rs"):
            require_library_file()
