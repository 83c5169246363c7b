"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/tree_comparator.py
Walks the source tree and matches every file against a DestinationIndex.

PIPELINE
--------
1. Normalize both roots and validate them (fatal InvalidRootError otherwise)
2. Build the destination index, leaving out the source subtree when filtering
3. For each source file: first content match among the candidates, then
   report it, or delete it and prune its parent directory if that became empty
4. Return the RunSummary

Any failure below the root check is handled per file: it is logged, reported as
Disposition.ERROR, and the walk goes on.
"""

import os
import logging
from typing import Iterator, Optional

from comparetrees.core.errors import CompareTreesError, DeleteError
from comparetrees.core.index import DestinationIndex, PROGRESS_INTERVAL
from comparetrees.core.interfaces import ContentComparator, ProgressCallback, ResultCallback
from comparetrees.core.models import ComparisonResult, Disposition, FileEntry, MatchMode, RunSummary
from comparetrees.core.scanner import TreeScanner
from comparetrees.services.file_service import FileService
from comparetrees.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class TreeComparator:
    """
    Compares a source tree against a destination tree.

    Args:
        comparator: ContentComparator for the byte-exact check (default: diff or filecmp)
        match_mode: Candidate selection, by size (default) or by file name
        file_service: Filesystem mutation surface, replaceable in tests
    """

    def __init__(
        self,
        comparator: Optional[ContentComparator] = None,
        match_mode: MatchMode = MatchMode.SIZE,
        file_service: type = FileService,
    ):
        self.comparator = comparator
        self.match_mode = match_mode
        self.file_service = file_service

    def build_index(
        self,
        source_root: str,
        dest_root: str,
        filter_source: bool = True,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> DestinationIndex:
        """Index dest_root, excluding source_root from it when filter_source is set."""
        source_root = ConvertUtils.normalize_path(source_root)
        dest_root = ConvertUtils.normalize_path(dest_root)
        exclude_prefix = source_root if filter_source else None

        logger.info(f"Scanning {dest_root}...")
        index = DestinationIndex.build(
            dest_root,
            exclude_prefix=exclude_prefix,
            comparator=self.comparator,
            progress_callback=progress_callback,
        )
        logger.info("Scan finished")
        return index

    def run(
        self,
        source_root: str,
        dest_root: str,
        delete: bool = False,
        filter_source: bool = True,
        on_result: Optional[ResultCallback] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> RunSummary:
        """
        Compare source_root with dest_root and return the totals.

        Raises:
            InvalidRootError: If either root is missing or not a directory.
        """
        source_root = ConvertUtils.normalize_path(source_root)
        dest_root = ConvertUtils.normalize_path(dest_root)
        TreeScanner(source_root).validate()

        logger.info(f"Comparing {source_root} with {dest_root}. Delete files: {delete}.")
        index = self.build_index(source_root, dest_root, filter_source, progress_callback)

        summary = RunSummary()
        for result in self.iter_results(source_root, index, delete, progress_callback):
            summary.record(result)
            if on_result:
                on_result(result)

        logger.info(
            f"{summary.matched_count} of {summary.total_files} files matched, "
            f"{summary.total_bytes_matched} bytes"
        )
        return summary

    def iter_results(
        self,
        source_root: str,
        index: DestinationIndex,
        delete: bool = False,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Iterator[ComparisonResult]:
        """Generator producing one ComparisonResult per regular file under source_root."""
        source_root = ConvertUtils.normalize_path(source_root)
        processed = 0

        for entry in TreeScanner(source_root).scan():
            yield self._process_file(entry, index, delete)
            processed += 1
            if progress_callback and processed % PROGRESS_INTERVAL == 0:
                progress_callback("comparing", processed, None)

        if progress_callback:
            progress_callback("comparing", processed, processed)

    def _process_file(
        self,
        entry: FileEntry,
        index: DestinationIndex,
        delete: bool,
    ) -> ComparisonResult:
        path = entry.path
        try:
            size = entry.size
            match = index.find_match(path, self.match_mode)
        except (CompareTreesError, OSError) as e:
            logger.error(f"Error processing file {path}: {type(e).__name__} - {e}")
            return ComparisonResult(path, Disposition.ERROR, error=str(e))

        if match is None:
            logger.debug(f"No match: {path}")
            return ComparisonResult(path, Disposition.NO_MATCH, size=size)

        matched_size = self._size_or_none(match)

        if not delete:
            return ComparisonResult(
                path, Disposition.WOULD_DELETE, size=size,
                matched_path=match, matched_size=matched_size,
            )

        try:
            self.file_service.delete_file(path)
        except DeleteError as e:
            logger.error(f"Error deleting {path}: {e}")
            return ComparisonResult(
                path, Disposition.ERROR, size=size,
                matched_path=match, matched_size=matched_size, error=str(e),
            )

        logger.debug(f"Deleted {path}  =  {match}")
        removed_dir = self._prune_parent(path)
        return ComparisonResult(
            path, Disposition.DELETED, size=size,
            matched_path=match, matched_size=matched_size, removed_dir=removed_dir,
        )

    def _prune_parent(self, path: str) -> Optional[str]:
        """Remove the parent of a deleted file if it is now empty, the source root included."""
        parent = os.path.dirname(path)

        try:
            removed = self.file_service.remove_dir_if_empty(parent)
        except DeleteError as e:
            logger.error(f"Error deleting {parent}: {e}")
            return None

        if not removed:
            return None
        logger.debug(f"Deleted empty directory {parent}")
        return parent

    @staticmethod
    def _size_or_none(path: str) -> Optional[int]:
        try:
            return os.stat(path).st_size
        except OSError as e:
            logger.warning(f"Could not get size of {path}: {e}")
            return None
