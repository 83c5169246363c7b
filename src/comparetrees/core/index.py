"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
In-memory index of the destination tree, keyed by file size and by file name.

The index is built in a single pass and is read-only afterwards. Buckets are
sorted by path so candidates are always tried in the same order.
"""

import os
import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from comparetrees.core.comparator import default_comparator
from comparetrees.core.errors import CompareError, StatError
from comparetrees.core.interfaces import ContentComparator, ProgressCallback
from comparetrees.core.models import FileEntry, MatchMode
from comparetrees.core.scanner import TreeScanner
from comparetrees.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 5000


def _freeze(buckets: Dict) -> Mapping:
    return MappingProxyType({key: tuple(sorted(paths)) for key, paths in buckets.items()})


class DestinationIndex:
    """
    Size and name lookup over every regular file of a destination tree.

    Attributes:
        root_dir: Normalized destination root
        exclude_prefix: Prefix that was filtered out of the index, if any
        comparator: ContentComparator used by same_file()
    """

    def __init__(
        self,
        root_dir: str,
        by_size: Mapping[int, Tuple[str, ...]],
        by_name: Mapping[str, Tuple[str, ...]],
        comparator: Optional[ContentComparator] = None,
        exclude_prefix: Optional[str] = None,
    ):
        self.root_dir = root_dir
        self.exclude_prefix = exclude_prefix
        self.comparator = comparator or default_comparator()
        self._by_size = by_size
        self._by_name = by_name

    @classmethod
    def build(
        cls,
        root_dir: str,
        exclude_prefix: Optional[str] = None,
        comparator: Optional[ContentComparator] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> "DestinationIndex":
        """
        Scan root_dir once and return the finished index.

        Raises:
            InvalidRootError: If root_dir is missing or not a directory.
        """
        scanner = TreeScanner(root_dir, exclude_prefix=exclude_prefix)
        return cls.from_entries(
            scanner.root_dir,
            scanner.scan(),
            comparator=comparator,
            exclude_prefix=exclude_prefix,
            progress_callback=progress_callback,
        )

    @classmethod
    def from_entries(
        cls,
        root_dir: str,
        entries: Iterable[FileEntry],
        comparator: Optional[ContentComparator] = None,
        exclude_prefix: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> "DestinationIndex":
        """Build an index from already scanned entries."""
        by_size = defaultdict(set)
        by_name = defaultdict(set)
        indexed = 0

        for entry in entries:
            by_size[entry.size].add(entry.path)
            by_name[entry.name].add(entry.path)
            indexed += 1
            if progress_callback and indexed % PROGRESS_INTERVAL == 0:
                progress_callback("indexing", indexed, None)

        if progress_callback:
            progress_callback("indexing", indexed, indexed)
        logger.info(f"Indexed {indexed} files under {root_dir}")

        return cls(
            root_dir,
            _freeze(by_size),
            _freeze(by_name),
            comparator=comparator,
            exclude_prefix=exclude_prefix,
        )

    # ----- queries -----

    def __len__(self) -> int:
        return sum(len(paths) for paths in self._by_size.values())

    def sizes(self) -> Tuple[int, ...]:
        return tuple(sorted(self._by_size))

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._by_name))

    def lookup_by_size(self, path: str) -> Tuple[str, ...]:
        """
        Indexed paths whose size equals the size of `path`.

        Raises:
            StatError: If `path` cannot be stat'ed.
        """
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise StatError(f"Could not get size of {path}: {e}") from e
        return self._by_size.get(size, ())

    def lookup_by_name(self, path: str) -> Tuple[str, ...]:
        """Indexed paths sharing the base file name of `path`."""
        return self._by_name.get(os.path.basename(path), ())

    def lookup(self, path: str, mode: MatchMode = MatchMode.SIZE) -> Tuple[str, ...]:
        if mode is MatchMode.NAME:
            return self.lookup_by_name(path)
        return self.lookup_by_size(path)

    def same_file(self, first: str, second: str) -> bool:
        """
        True if the two paths are different locations with identical content.
        Never raises: comparison failures are logged and count as a mismatch.
        """
        # a file never matches itself
        if ConvertUtils.paths_equal(first, second):
            return False

        try:
            if os.stat(first).st_size != os.stat(second).st_size:
                return False
            return self.comparator.files_equal(first, second)
        except (OSError, CompareError) as e:
            logger.error(f"Error comparing {first} and {second}: {type(e).__name__} - {e}")
            return False

    def find_match(self, path: str, mode: MatchMode = MatchMode.SIZE) -> Optional[str]:
        """
        First indexed file with the same content as `path`, or None.

        Raises:
            StatError: If `path` cannot be stat'ed in size mode.
        """
        for candidate in self.lookup(path, mode):
            if self.same_file(path, candidate):
                return candidate
        return None

    def contains(self, path: str, mode: MatchMode = MatchMode.SIZE) -> bool:
        """True if a file with the same content as `path` is indexed."""
        return self.find_match(path, mode) is not None

    def __repr__(self):
        return f"<DestinationIndex root={self.root_dir}, files={len(self)}>"
