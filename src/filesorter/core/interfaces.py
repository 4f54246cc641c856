"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/interfaces.py

Defines core interfaces (Protocols) used throughout the listing pipeline.
They keep the pure sorter separate from the collaborators that touch the disk.

Key Components:
---------------
- DirectoryScanner: materializes File entries for one directory.
- SizeCalculator: builds the path → aggregate size table for directories.
- Sorter: reorders a listing in place.
"""

from typing import Protocol, List, Dict, Mapping, Optional, Callable
from filesorter.core.models import File


class DirectoryScanner(Protocol):
    """Interface for listing a directory into File entries."""
    def scan(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[File]:
        """
        List the configured directory.

        Args:
            stopped_flag: Function that returns True if operation should be canceled.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Entries in directory order (unsorted).
        """
        ...


class SizeCalculator(Protocol):
    """Interface for aggregating directory sizes."""
    def directory_sizes(
        self,
        files: List[File],
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Dict[str, int]:
        """Return a table mapping directory paths to their recursive size in bytes."""
        ...


class Sorter(Protocol):
    """Interface for the ordering engine."""
    def sort(self, items: List[File], sizes: Optional[Mapping[str, int]] = None) -> bool:
        """Reorder items in place; False only when there was nothing to sort."""
        ...
