"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem mutations performed by a comparison run.
Files are deleted permanently; directories are only removed when empty.
"""
import os
from pathlib import Path

from comparetrees.core.errors import DeleteError


class FileService:
    """
    The only code that writes to the filesystem.
    Every failure is raised as DeleteError with the original OSError chained.
    """

    @staticmethod
    def delete_file(file_path: str) -> None:
        """Deletes a regular file."""
        path = Path(file_path)

        if not path.is_file() or path.is_symlink():
            raise DeleteError(f"Not a regular file: {file_path}")

        try:
            path.unlink()
        except OSError as e:
            raise DeleteError(f"Failed to delete {file_path}: {e}") from e

    @staticmethod
    def is_dir_empty(dir_path: str) -> bool:
        """True if the directory has no entries, hidden ones included."""
        with os.scandir(dir_path) as entries:
            return next(entries, None) is None

    @classmethod
    def remove_dir_if_empty(cls, dir_path: str) -> bool:
        """
        Removes the directory if it has no entries.
        Returns True if it was removed, False if it still has content.
        """
        try:
            if not cls.is_dir_empty(dir_path):
                return False
            os.rmdir(dir_path)
        except OSError as e:
            raise DeleteError(f"Failed to delete directory {dir_path}: {e}") from e
        return True
