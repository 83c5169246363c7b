"""
Command orchestrator for tree comparison.
Turns validated CompareParams into one TreeComparator run — used by the CLI and library callers.
"""
from typing import Optional

from comparetrees.core.interfaces import ContentComparator, ProgressCallback, ResultCallback
from comparetrees.core.models import CompareParams, RunSummary
from comparetrees.core.tree_comparator import TreeComparator


class CompareTreesCommand:
    """
    Orchestrates one comparison run:
    1. Build a TreeComparator for the requested match mode
    2. Index the destination tree
    3. Walk the source tree, streaming results to on_result

    Usage:
        params = CompareParams(source_dir="~/inbox", dest_dir="~/archive", delete=False)
        command = CompareTreesCommand()
        summary = command.execute(params, on_result=print)
    """

    def __init__(self, comparator: Optional[ContentComparator] = None):
        self.comparator = comparator
        self.tree_comparator: Optional[TreeComparator] = None

    def execute(
            self,
            params: CompareParams,
            on_result: Optional[ResultCallback] = None,
            progress_callback: Optional[ProgressCallback] = None,
    ) -> RunSummary:
        """
        Execute the comparison with given parameters.

        Args:
            params: Validated comparison parameters
            on_result: (result: ComparisonResult) -> None, called once per source file
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            RunSummary with the run totals

        Raises:
            InvalidRootError: If either directory is missing or not a directory
        """
        self.tree_comparator = TreeComparator(
            comparator=self.comparator,
            match_mode=params.match_mode,
        )

        return self.tree_comparator.run(
            params.source_dir,
            params.dest_dir,
            delete=params.delete,
            filter_source=params.filter_source,
            on_result=on_result,
            progress_callback=progress_callback,
        )
