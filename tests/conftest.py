"""
Shared fixtures for listing and sorting tests.
Creates isolated temporary directories with controlled entries.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'filesorter' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from filesorter.core.models import File, FileMeta


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def listing_dir(temp_dir) -> Dict[str, Path]:
    """
    Creates a directory with a controlled mix of entries:
    - 2 directories ("docs" with 3000 bytes inside, "empty_dir")
    - 3 regular files of different sizes and natural-order names
    - 1 hidden dotfile
    - 1 symlink to a regular file (skipped by callers on platforms without symlinks)
    """
    entries = {}

    entries["docs"] = temp_dir / "docs"
    entries["docs"].mkdir()
    (entries["docs"] / "a.txt").write_bytes(b"A" * 1000)
    nested = entries["docs"] / "nested"
    nested.mkdir()
    (nested / "b.txt").write_bytes(b"B" * 2000)

    entries["empty_dir"] = temp_dir / "empty_dir"
    entries["empty_dir"].mkdir()

    entries["file2"] = temp_dir / "file2.txt"
    entries["file2"].write_bytes(b"x" * 20)
    entries["file10"] = temp_dir / "file10.txt"
    entries["file10"].write_bytes(b"x" * 100)
    entries["file1"] = temp_dir / "file1.txt"
    entries["file1"].write_bytes(b"x" * 10)

    entries["hidden"] = temp_dir / ".hidden"
    entries["hidden"].write_bytes(b"h")

    link = temp_dir / "link_to_file1"
    try:
        os.symlink(entries["file1"], link)
        entries["link"] = link
    except (OSError, NotImplementedError):
        pass

    return entries


def make_file(path: str, length: int = 0, is_dir: bool = False,
              created=None, modified=None) -> File:
    """Builds an in-memory entry for sorter tests."""
    return File(
        path=path,
        length=length,
        is_dir=is_dir,
        meta=FileMeta(created=created, modified=modified),
    )


@pytest.fixture
def mixed_entries():
    """Three directories and three files, interleaved, with distinct sizes and times."""
    return [
        make_file("/data/zeta.log", length=30, created=300.0, modified=30.0),
        make_file("/data/Beta", length=0, is_dir=True, created=100.0, modified=60.0),
        make_file("/data/alpha.txt", length=10, created=200.0, modified=10.0),
        make_file("/data/omega", length=0, is_dir=True, created=600.0, modified=40.0),
        make_file("/data/Gamma.md", length=20, created=500.0, modified=20.0),
        make_file("/data/delta", length=0, is_dir=True, created=400.0, modified=50.0),
    ]
