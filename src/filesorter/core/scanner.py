"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Materializes the entries of a single directory for display.
Features:
- One level only (a listing, not a tree walk)
- Precomputes directory, symlink and hidden flags plus symlink targets
- Collects created/modified timestamps where the platform provides them
- Returns entries in directory order; ordering is the sorter's job
"""

import os
import stat
import sys
import time
import logging
from pathlib import Path
from typing import List, Optional, Callable

from filesorter.core.models import File, FileMeta
from filesorter.core.interfaces import DirectoryScanner

logger = logging.getLogger(__name__)

# Windows hidden attribute (stat.FILE_ATTRIBUTE_HIDDEN exists only on Windows builds)
_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 2)


class DirectoryScannerImpl(DirectoryScanner):
    """
    Lists one directory into File entries.

    Attributes:
        root_dir: Directory to list
        show_hidden: Keep hidden entries (dotfiles, or the hidden attribute on Windows)
    """

    def __init__(self, root_dir: str, show_hidden: bool = False):
        self.root_dir = root_dir
        self.show_hidden = show_hidden

    def scan(self,
             stopped_flag: Optional[Callable[[], bool]] = None,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> List[File]:
        """
        Single pass over the directory with throttled progress updates.
        Entries whose metadata cannot be read are skipped and logged.
        """
        logger.debug(f"Listing directory: {self.root_dir} (show_hidden={self.show_hidden})")

        found: List[File] = []
        root_path = Path(self.root_dir)

        if stopped_flag and stopped_flag():
            logger.debug("Listing cancelled before start")
            return []

        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        progress_interval = 1000
        processed = 0
        start_time = time.time()

        try:
            with os.scandir(root_path) as it:
                for entry in it:
                    if stopped_flag and stopped_flag():
                        logger.debug("Listing interrupted by user")
                        return []

                    file = self._process_entry(entry)
                    processed += 1
                    if file is not None and (self.show_hidden or not file.is_hidden):
                        found.append(file)

                    if progress_callback and processed % progress_interval == 0:
                        progress_callback('listing', processed, None)
        except PermissionError as pe:
            logger.warning(f"Permission denied while listing: {pe}")

        if progress_callback and processed % progress_interval:
            progress_callback('listing', processed, None)

        logger.debug(f"Listed {processed} entries, kept {len(found)} in {time.time() - start_time:.3f}s")
        return found

    def _process_entry(self, entry: os.DirEntry) -> Optional[File]:
        """Build a File from a directory entry, or None if it cannot be inspected."""
        try:
            is_link = entry.is_symlink()
            link_to = os.readlink(entry.path) if is_link else None
        except OSError as e:
            logger.debug(f"Could not inspect link status of {entry.path}: {e}")
            return None

        try:
            st = entry.stat(follow_symlinks=True)
        except OSError:
            # Broken symlink: describe the link itself
            try:
                st = entry.stat(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Could not stat {entry.path}: {e}")
                return None

        return File(
            path=entry.path,
            length=st.st_size,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_link=is_link,
            link_to=link_to,
            is_hidden=self._is_hidden(entry.name, st),
            meta=FileMeta(created=self._created_time(st), modified=st.st_mtime),
            name=entry.name,
        )

    @staticmethod
    def _is_hidden(name: str, st: os.stat_result) -> bool:
        if name.startswith("."):
            return True
        attributes = getattr(st, "st_file_attributes", 0)
        return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)

    @staticmethod
    def _created_time(st: os.stat_result) -> Optional[float]:
        """
        Birth time where the platform records it (macOS/BSD, newer Windows builds).
        On Windows st_ctime is the creation time; on Linux there is none.
        """
        birth = getattr(st, "st_birthtime", None)
        if birth is not None:
            return birth
        if sys.platform == "win32":
            return st.st_ctime
        return None
