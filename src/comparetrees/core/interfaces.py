"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used by the comparison engine.

Key Components:
---------------
- ContentComparator: exact byte-level comparison of two files.
- ProgressCallback / ResultCallback: hooks used by front ends to follow a run.
"""

from typing import Protocol, Callable, Optional
from comparetrees.core.models import ComparisonResult


ProgressCallback = Callable[[str, int, Optional[int]], None]
ResultCallback = Callable[[ComparisonResult], None]


class ContentComparator(Protocol):
    """
    Interface for exact content comparison.

    Allows plugging in an external diff tool, an in-process comparison,
    or an in-memory fake for tests.
    """

    def files_equal(self, first: str, second: str) -> bool:
        """
        Return True if both files have byte-identical content.

        Raises:
            CompareError: If the comparison itself failed.
        """
        ...
