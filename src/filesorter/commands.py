"""
Unified command orchestrator for directory listings.
This is the SINGLE source of truth for the listing workflow — used by the CLI
and by anything embedding the package. Pure Python, no UI dependencies.
"""
import logging
from typing import List, Dict, Optional, Callable, Tuple

from filesorter.core.models import File, ListingParams
from filesorter.core.scanner import DirectoryScannerImpl
from filesorter.core.sorter import FilesSorter
from filesorter.services.size_service import SizeService

logger = logging.getLogger(__name__)


class ListingCommand:
    """
    Orchestrates the listing workflow:
    1. List the directory into File entries
    2. Optionally aggregate directory sizes
    3. Sort the entries with the configured snapshot

    Usage:
        params = ListingParams(root_dir="/home/user/Downloads", sort=SortParams(by=SortBy.NATURAL))
        files, sizes = ListingCommand().execute(params)
    """

    def __init__(self):
        self._size_service = SizeService()

    def execute(
            self,
            params: ListingParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> Tuple[List[File], Dict[str, int]]:
        """
        Execute a listing with given parameters.

        Args:
            params: Validated listing parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            Tuple of (sorted_entries, size_table)

        Raises:
            RuntimeError: If the directory cannot be listed
        """
        scanner = DirectoryScannerImpl(root_dir=params.root_dir, show_hidden=params.show_hidden)
        files = scanner.scan(stopped_flag=stopped_flag, progress_callback=progress_callback)

        sizes: Dict[str, int] = {}
        if params.dir_sizes:
            sizes = self._size_service.directory_sizes(
                files, stopped_flag=stopped_flag, progress_callback=progress_callback)

        if not FilesSorter(params.sort).sort(files, sizes):
            logger.debug(f"Nothing to sort in {params.root_dir}")

        return files, sizes
