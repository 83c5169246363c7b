"""
Core comparison engine — scanner, destination index, content comparators and tree comparator.

This package contains the matching logic:
- TreeScanner: recursive walk yielding regular files in sorted order
- DestinationIndex: size/name index of the destination tree with the exact-match predicate
- DiffCommandComparator / FilecmpComparator: byte-exact content comparison
- TreeComparator: walks the source tree, reports or deletes matched files
- Models: FileEntry, ComparisonResult, RunSummary and configuration objects

No console output here — suitable for CLI and library usage.
"""

from .scanner import TreeScanner
from .index import DestinationIndex
from .comparator import DiffCommandComparator, FilecmpComparator, default_comparator
from .tree_comparator import TreeComparator
from .errors import CompareTreesError, InvalidRootError, StatError, CompareError, DeleteError
from .models import (
    FileEntry, ComparisonResult, RunSummary, CompareParams, MatchMode, Disposition)

__all__ = [
    "TreeScanner",
    "DestinationIndex",
    "DiffCommandComparator",
    "FilecmpComparator",
    "default_comparator",
    "TreeComparator",
    "CompareTreesError",
    "InvalidRootError",
    "StatError",
    "CompareError",
    "DeleteError",
    "FileEntry",
    "ComparisonResult",
    "RunSummary",
    "CompareParams",
    "MatchMode",
    "Disposition",
]
