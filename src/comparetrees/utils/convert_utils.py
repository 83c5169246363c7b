"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import os

KB = 1024
MB = 1024 ** 2
GB = 1024 ** 3
TB = 1024 ** 4


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int, max_digits: int = 3) -> str:
        """
        Convert bytes to human-readable string (e.g., 512B, 1.50KB, 12.3MB).
        Values of 1KB and above get max_digits significant digits.
        """
        if size_bytes < 0:
            return "0B"
        if size_bytes < KB:
            return f"{size_bytes}B"

        if size_bytes < MB:
            value, unit = size_bytes / KB, "KB"
        elif size_bytes < GB:
            value, unit = size_bytes / MB, "MB"
        elif size_bytes < TB:
            value, unit = size_bytes / GB, "GB"
        else:
            value, unit = size_bytes / TB, "TB"

        used_digits = len(str(int(value)))
        precision = max(max_digits - used_digits, 0)
        return f"{value:.{precision}f}{unit}"

    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Canonical form used for every path comparison: absolute,
        forward slashes, no trailing separator.
        """
        path = os.path.abspath(path).replace("\\", "/")
        if len(path) > 1 and path.endswith("/") and not path.endswith(":/"):
            path = path.rstrip("/")
        return path

    @staticmethod
    def paths_equal(first: str, second: str) -> bool:
        """True if both paths name the same location, ignoring case."""
        return ConvertUtils.normalize_path(first).casefold() == \
            ConvertUtils.normalize_path(second).casefold()
