"""
Shared fixtures for comparison engine tests.
Creates isolated source/destination trees with controlled file contents.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple
import sys

# Add src/ to sys.path so 'comparetrees' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


class CountingComparator:
    """In-memory ContentComparator fake that records every call."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def files_equal(self, first: str, second: str) -> bool:
        self.calls.append((first, second))
        return Path(first).read_bytes() == Path(second).read_bytes()


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def comparator():
    return CountingComparator()


@pytest.fixture
def trees(temp_dir) -> Dict[str, Path]:
    """
    Creates a source and a destination tree:
    - src/same_name.txt    matches dst/same_name.txt (same name, same content)
    - src/renamed.bin      matches dst/deep/other.bin (different name)
    - src/sub/only.txt     matches dst/deep/copy.txt; only file in src/sub
    - src/unique.txt       no counterpart
    - src/collide.txt      same size as dst/collide.txt, different content
    """
    src = temp_dir / "src"
    dst = temp_dir / "dst"
    (src / "sub").mkdir(parents=True)
    (dst / "deep").mkdir(parents=True)

    files = {"src": src, "dst": dst}

    files["same_name"] = src / "same_name.txt"
    files["same_name"].write_bytes(b"A" * 100)
    (dst / "same_name.txt").write_bytes(b"A" * 100)

    files["renamed"] = src / "renamed.bin"
    files["renamed"].write_bytes(b"B" * 2048)
    files["renamed_dst"] = dst / "deep" / "other.bin"
    files["renamed_dst"].write_bytes(b"B" * 2048)

    files["only"] = src / "sub" / "only.txt"
    files["only"].write_bytes(b"only file content")
    files["only_dst"] = dst / "deep" / "copy.txt"
    files["only_dst"].write_bytes(b"only file content")

    files["unique"] = src / "unique.txt"
    files["unique"].write_bytes(b"nothing like this anywhere")

    files["collide"] = src / "collide.txt"
    files["collide"].write_bytes(b"foo")
    (dst / "collide.txt").write_bytes(b"bar")

    return files
