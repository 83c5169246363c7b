"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Recursive directory traversal shared by the destination index and the source walk.
Features:
- Yields regular files only (symlinks and special files are skipped)
- Deterministic order: directories and files are visited in sorted order
- Unreadable directories and entries are logged and skipped
"""

import os
import stat
import logging
from typing import Iterator, Optional

from comparetrees.core.errors import InvalidRootError
from comparetrees.core.models import FileEntry
from comparetrees.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class TreeScanner:
    """
    Walks a directory tree and yields a FileEntry for every regular file.

    Attributes:
        root_dir: Normalized root directory to scan
        exclude_prefix: Normalized path prefix; files whose path starts with it are skipped
    """

    def __init__(self, root_dir: str, exclude_prefix: Optional[str] = None):
        self.root_dir = ConvertUtils.normalize_path(root_dir)
        self.exclude_prefix = exclude_prefix

    def validate(self) -> None:
        """Raise InvalidRootError unless the root is an existing directory."""
        if not os.path.exists(self.root_dir):
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg)
        if not os.path.isdir(self.root_dir):
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg)

    def scan(self) -> Iterator[FileEntry]:
        """
        Generator over all regular files under the root.
        The root is validated before the first entry is produced.
        """
        self.validate()
        logger.debug(f"Scanning directory: {self.root_dir}")

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            dirs.sort()
            base = root.replace(os.sep, "/").rstrip("/")
            for filename in sorted(files):
                path = f"{base}/{filename}"
                entry = self._process_file(path)
                if entry is not None:
                    yield entry

    def _process_file(self, path: str) -> Optional[FileEntry]:
        """
        Return a FileEntry if path is a regular file outside the excluded prefix.
        """
        if self.exclude_prefix is not None and path.startswith(self.exclude_prefix):
            logger.debug(f"Skipping excluded file: {path}")
            return None

        try:
            st = os.lstat(path)
        except OSError as e:
            logger.warning(f"Could not stat {path}: {e}")
            return None

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        return FileEntry(path, st.st_size)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")
