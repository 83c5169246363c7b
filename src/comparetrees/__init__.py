"""
comparetrees — find (and optionally delete) files of one directory tree that
already exist anywhere in another.

Core features:
- Destination tree indexed once by file size (or file name)
- Byte-exact comparison through an external diff tool or in-process filecmp
- Dry run by default; deletion prunes directories left empty
- CLI interface: comparetrees <source> <dest> [/delete]
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("comparetrees")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from comparetrees.commands import CompareTreesCommand
from comparetrees.core import (
    CompareParams, ComparisonResult, DestinationIndex, Disposition, FileEntry,
    MatchMode, RunSummary, TreeComparator, DiffCommandComparator, FilecmpComparator,
    CompareTreesError, InvalidRootError,
)
from comparetrees.utils.convert_utils import ConvertUtils
from comparetrees.services.file_service import FileService

__all__ = [
    "CompareTreesCommand",
    "CompareParams",
    "ComparisonResult",
    "DestinationIndex",
    "Disposition",
    "FileEntry",
    "MatchMode",
    "RunSummary",
    "TreeComparator",
    "DiffCommandComparator",
    "FilecmpComparator",
    "CompareTreesError",
    "InvalidRootError",
    "ConvertUtils",
    "FileService",
    "__version__",
]
