"""
Tests for file service — the only code that deletes anything.
"""
import os
import pytest
from unittest import mock
from comparetrees.services.file_service import FileService
from comparetrees.core.errors import DeleteError


class TestDeleteFile:

    def test_deletes_file(self, tmp_path):
        test_file = tmp_path / "test.txt"
        test_file.write_text("content to delete")

        FileService.delete_file(str(test_file))

        assert not test_file.exists(), "File must be removed after delete_file()"

    def test_preserves_other_files_in_directory(self, tmp_path):
        keep = tmp_path / "keep_me.txt"
        delete = tmp_path / "delete_me.txt"
        keep.write_text("keep")
        delete.write_text("delete")

        FileService.delete_file(str(delete))

        assert keep.exists()
        assert not delete.exists()

    def test_raises_for_nonexistent_file(self, tmp_path):
        with pytest.raises(DeleteError, match="Not a regular file"):
            FileService.delete_file(str(tmp_path / "does_not_exist.txt"))

    def test_refuses_directories(self, tmp_path):
        with pytest.raises(DeleteError):
            FileService.delete_file(str(tmp_path))
        assert tmp_path.exists()

    def test_wraps_os_errors(self, tmp_path):
        test_file = tmp_path / "locked.txt"
        test_file.write_text("x")

        with mock.patch("pathlib.Path.unlink", side_effect=PermissionError("Permission denied")):
            with pytest.raises(DeleteError, match="Permission denied") as exc_info:
                FileService.delete_file(str(test_file))

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert test_file.exists()


class TestRemoveDirIfEmpty:

    def test_removes_empty_directory(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        assert FileService.remove_dir_if_empty(str(empty)) is True
        assert not empty.exists()

    def test_keeps_non_empty_directory(self, tmp_path):
        full = tmp_path / "full"
        full.mkdir()
        (full / "file.txt").write_text("x")

        assert FileService.remove_dir_if_empty(str(full)) is False
        assert full.exists()

    def test_hidden_entries_count_as_content(self, tmp_path):
        d = tmp_path / "d"
        d.mkdir()
        (d / ".keep").write_text("")

        assert FileService.is_dir_empty(str(d)) is False
        assert FileService.remove_dir_if_empty(str(d)) is False

    def test_subdirectory_counts_as_content(self, tmp_path):
        d = tmp_path / "d"
        (d / "child").mkdir(parents=True)

        assert FileService.remove_dir_if_empty(str(d)) is False

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(DeleteError, match="Failed to delete directory"):
            FileService.remove_dir_if_empty(str(tmp_path / "missing"))

    def test_rmdir_failure_raises(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        with mock.patch("os.rmdir", side_effect=OSError(16, "Device or resource busy")):
            with pytest.raises(DeleteError, match="busy"):
                FileService.remove_dir_if_empty(str(empty))
