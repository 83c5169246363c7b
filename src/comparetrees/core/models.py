"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for tree comparison: matching modes, per-file results and run totals.
"""

from dataclasses import dataclass, field
from typing import Optional
import os
from enum import Enum


# =============================
# Enums
# =============================

class MatchMode(Enum):
    """
    How candidates for a source file are selected from the destination index.
    """
    SIZE = "size"
    NAME = "name"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            MatchMode.SIZE: "Size",
            MatchMode.NAME: "File name",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Disposition(Enum):
    """What happened to a single source file."""
    DELETED = "deleted"
    WOULD_DELETE = "would-delete"
    NO_MATCH = "no-match"
    ERROR = "error"

    @property
    def is_match(self) -> bool:
        return self in (Disposition.DELETED, Disposition.WOULD_DELETE)


# ======================
#  Core Data Models
# ======================

class FileEntry:
    """
    A path to a regular file. Size is read from disk on first access and cached.
    """
    __slots__ = ("path", "_size")

    def __init__(self, path: str, size: Optional[int] = None):
        self.path = path
        self._size = size

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def size(self) -> int:
        if self._size is None:
            self._size = os.stat(self.path).st_size
        return self._size

    def __eq__(self, other) -> bool:
        return isinstance(other, FileEntry) and self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self._size}>"


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome for one source file. Produced once, never updated.
    """
    source_path: str
    disposition: Disposition
    size: int = 0
    matched_path: Optional[str] = None
    matched_size: Optional[int] = None
    removed_dir: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_match(self) -> bool:
        return self.disposition.is_match

    def __repr__(self):
        return f"<ComparisonResult {self.disposition.value} {self.source_path}>"


@dataclass
class RunSummary:
    """
    Totals accumulated over one run.
    """
    total_files: int = 0
    matched_count: int = 0
    total_bytes_matched: int = 0

    def record(self, result: ComparisonResult) -> None:
        self.total_files += 1
        if result.is_match:
            self.matched_count += 1
            self.total_bytes_matched += result.size


"""
DTO for comparison parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

@dataclass
class CompareParams:
    """Parameters for one comparison run with validation."""
    source_dir: str
    dest_dir: str
    delete: bool = False
    filter_source: bool = True
    match_mode: MatchMode = field(default=MatchMode.SIZE)

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.source_dir:
            raise ValueError("Source directory cannot be empty")
        if not self.dest_dir:
            raise ValueError("Destination directory cannot be empty")
        if not isinstance(self.match_mode, MatchMode):
            self.match_mode = MatchMode(self.match_mode)

    @staticmethod
    def from_cli_args(
            source_dir: str,
            dest_dir: str,
            delete_switch: Optional[str] = None,
            match_mode: MatchMode = MatchMode.SIZE,
            filter_source: bool = True,
    ) -> 'CompareParams':
        """
        Factory method to create params from the positional command line form
        `<source> <dest> [/delete]`.
        """
        from comparetrees.aliases import DELETE_SWITCH

        delete = False
        if delete_switch is not None:
            if delete_switch.lower() != DELETE_SWITCH:
                raise ValueError(f"Final parameter must be blank or {DELETE_SWITCH}")
            delete = True

        return CompareParams(
            source_dir=source_dir,
            dest_dir=dest_dir,
            delete=delete,
            filter_source=filter_source,
            match_mode=match_mode,
        )
