"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception types raised by the comparison engine.

Only InvalidRootError is fatal. The others are caught per file or per directory,
logged, and turned into a non-aborting outcome.
"""


class CompareTreesError(RuntimeError):
    """Base class for all comparison errors."""


class InvalidRootError(CompareTreesError):
    """Source or destination root is missing or is not a directory."""


class StatError(CompareTreesError):
    """File metadata could not be read."""


class CompareError(CompareTreesError):
    """Content comparison could not be carried out."""


class DeleteError(CompareTreesError):
    """A file or directory could not be removed."""
