"""
Tests for conversion utilities — byte formatting for the run summary and path normalization.
"""
import os
import pytest
from comparetrees.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    """Binary prefixes with a fixed budget of significant digits."""

    def test_plain_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0B"
        assert ConvertUtils.bytes_to_human(3) == "3B"
        assert ConvertUtils.bytes_to_human(1023) == "1023B"

    def test_kilobytes(self):
        assert ConvertUtils.bytes_to_human(1024) == "1.00KB"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(10 * 1024) == "10.0KB"
        assert ConvertUtils.bytes_to_human(100 * 1024) == "100KB"

    def test_larger_units(self):
        assert ConvertUtils.bytes_to_human(1024 ** 2) == "1.00MB"
        assert ConvertUtils.bytes_to_human(int(2.5 * 1024 ** 3)) == "2.50GB"
        assert ConvertUtils.bytes_to_human(1024 ** 4) == "1.00TB"
        assert ConvertUtils.bytes_to_human(2048 * 1024 ** 4) == "2048TB"

    def test_max_digits(self):
        assert ConvertUtils.bytes_to_human(1536, max_digits=5) == "1.5000KB"
        assert ConvertUtils.bytes_to_human(1536, max_digits=1) == "2KB"

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"


class TestNormalizePath:

    def test_makes_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert ConvertUtils.normalize_path("sub") == os.path.join(os.getcwd(), "sub").replace("\\", "/")

    def test_strips_trailing_separator(self, tmp_path):
        assert not ConvertUtils.normalize_path(str(tmp_path) + os.sep).endswith("/")

    def test_root_is_kept(self):
        if os.sep == "/":
            assert ConvertUtils.normalize_path("/") == "/"

    def test_paths_equal_ignores_case(self, tmp_path):
        path = str(tmp_path / "File.TXT")
        assert ConvertUtils.paths_equal(path, path.swapcase())
        assert not ConvertUtils.paths_equal(path, str(tmp_path / "other.txt"))
