"""
Integration tests for CompareTreesCommand — the orchestration layer between CLI and core.
"""
import pytest
from comparetrees import CompareTreesCommand, CompareParams, MatchMode, Disposition
from comparetrees.core.errors import InvalidRootError
from comparetrees.core.comparator import FilecmpComparator


class TestCompareTreesCommand:

    def test_execute_returns_summary(self, trees):
        params = CompareParams(source_dir=str(trees["src"]), dest_dir=str(trees["dst"]))

        summary = CompareTreesCommand(comparator=FilecmpComparator()).execute(params)

        assert summary.total_files == 5
        assert summary.matched_count == 3
        assert trees["same_name"].exists()

    def test_execute_streams_results(self, trees, comparator):
        params = CompareParams(source_dir=str(trees["src"]), dest_dir=str(trees["dst"]))
        results = []

        CompareTreesCommand(comparator=comparator).execute(params, on_result=results.append)

        assert len(results) == 5
        assert sum(r.disposition is Disposition.WOULD_DELETE for r in results) == 3

    def test_execute_honours_match_mode(self, trees, comparator):
        params = CompareParams(
            source_dir=str(trees["src"]), dest_dir=str(trees["dst"]), match_mode=MatchMode.NAME
        )
        command = CompareTreesCommand(comparator=comparator)

        summary = command.execute(params)

        assert summary.matched_count == 1
        assert command.tree_comparator.match_mode is MatchMode.NAME

    def test_execute_deletes(self, trees, comparator):
        params = CompareParams(source_dir=str(trees["src"]), dest_dir=str(trees["dst"]), delete=True)

        summary = CompareTreesCommand(comparator=comparator).execute(params)

        assert summary.matched_count == 3
        assert not trees["renamed"].exists()

    def test_invalid_root_raises(self, temp_dir, comparator):
        params = CompareParams(source_dir=str(temp_dir / "nope"), dest_dir=str(temp_dir))
        with pytest.raises(InvalidRootError):
            CompareTreesCommand(comparator=comparator).execute(params)
