"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/size_service.py
Recursive directory size aggregation. Produces the size table the sorter
consults in SIZE mode.
"""
import os
import logging
from typing import List, Dict, Optional, Callable

from filesorter.core.models import File
from filesorter.core.interfaces import SizeCalculator

logger = logging.getLogger(__name__)


class SizeService(SizeCalculator):
    """
    Sums the sizes of all regular files below each directory entry.
    Symlinks are counted by their own size and never followed,
    so link cycles cannot inflate the total.
    """

    def directory_sizes(
            self,
            files: List[File],
            stopped_flag: Optional[Callable[[], bool]] = None,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Dict[str, int]:
        dirs = [f for f in files if f.is_dir and not f.is_link]
        sizes: Dict[str, int] = {}

        for idx, directory in enumerate(dirs, 1):
            if stopped_flag and stopped_flag():
                logger.debug("Size aggregation interrupted by user")
                break
            total = self.directory_size(directory.path, stopped_flag)
            if total is not None:
                sizes[directory.path] = total
            if progress_callback:
                progress_callback('sizing', idx, len(dirs))

        logger.debug(f"Aggregated sizes for {len(sizes)} of {len(dirs)} directories")
        return sizes

    @staticmethod
    def directory_size(path: str, stopped_flag: Optional[Callable[[], bool]] = None) -> Optional[int]:
        """
        Total size in bytes of everything below `path`.
        Returns None when cancelled, so a partial sum never reaches the table.
        """
        total = 0

        def on_error(err: OSError) -> None:
            logger.debug(f"Skipping unreadable directory: {err.filename} ({err.strerror})")

        for root, _dirs, names in os.walk(path, onerror=on_error):
            if stopped_flag and stopped_flag():
                return None
            for name in names:
                try:
                    total += os.lstat(os.path.join(root, name)).st_size
                except OSError as e:
                    logger.debug(f"Could not stat {os.path.join(root, name)}: {e}")
        return total
