"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Exact content comparators implementing ContentComparator.

- DiffCommandComparator shells out to `diff --binary --brief`
- FilecmpComparator compares in-process with filecmp
"""

import filecmp
import logging
import shutil
import subprocess
from typing import List, Optional

from comparetrees.core.errors import CompareError
from comparetrees.core.interfaces import ContentComparator

logger = logging.getLogger(__name__)


class DiffCommandComparator(ContentComparator):
    """
    Runs an external diff tool and interprets its exit status:
    0 means identical, 1 means different, anything else is an error.
    """

    DEFAULT_COMMAND = ["diff", "--binary", "--brief"]

    def __init__(self, command: Optional[List[str]] = None, timeout: Optional[float] = None):
        self.command = list(command) if command else list(self.DEFAULT_COMMAND)
        self.timeout = timeout

    def files_equal(self, first: str, second: str) -> bool:
        args = self.command + ["--", first, second]
        try:
            completed = subprocess.run(
                args,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise CompareError(f"Failed to run {self.command[0]}: {e}") from e

        if completed.returncode == 0:
            return True
        if completed.returncode == 1:
            return False

        stderr = completed.stderr.decode(errors="replace").strip() if completed.stderr else ""
        raise CompareError(
            f"{self.command[0]} exited with status {completed.returncode}: {stderr}"
        )


class FilecmpComparator(ContentComparator):
    """Byte-by-byte comparison without spawning a process."""

    def files_equal(self, first: str, second: str) -> bool:
        try:
            return filecmp.cmp(first, second, shallow=False)
        except OSError as e:
            raise CompareError(f"Failed to compare {first} and {second}: {e}") from e


def default_comparator() -> ContentComparator:
    """diff when it is installed, otherwise the in-process comparator."""
    if shutil.which(DiffCommandComparator.DEFAULT_COMMAND[0]):
        return DiffCommandComparator()
    logger.debug("diff not found on PATH, comparing in-process")
    return FilecmpComparator()
