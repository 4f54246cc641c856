"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure ordering logic for directory listings — no I/O, no global state.
Directories-first promotion always wins over the selected criterion and is never
affected by the reverse flag.
"""
import logging
from functools import cmp_to_key
from typing import Any, Callable, List, Mapping, Optional

from filesorter.core.models import File, SortBy, SortParams
from filesorter.core.natural import natural_form, compare_natural_forms, natural_compare

logger = logging.getLogger(__name__)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class FilesSorter:
    """
    Sorts a listing in-place according to a SortParams snapshot.
    Comparison priority (applied lexicographically):
    1. Directories before files, when dir_first is enabled (reverse never applies)
    2. The criterion selected by params.by, flipped when reverse is enabled:
       - ALPHABETICAL: path text, optionally lowercased
       - CREATED / MODIFIED: timestamp; a missing timestamp makes the pair equal
       - SIZE: aggregate size from the size table for directories, own length otherwise
       - NATURAL: digit-aware comparison of the path text
    Ties keep their input order (Python's sort is stable), but callers
    should not depend on that.
    """

    def __init__(self, params: Optional[SortParams] = None):
        self.params = params if params is not None else SortParams()

    def sort(self, items: List[File], sizes: Optional[Mapping[str, int]] = None) -> bool:
        """
        Reorder `items` in place. Returns False only for an empty list;
        True means the sort ran, not that the order changed.
        """
        if not items:
            return False

        if sizes is None:
            sizes = {}

        by = self.params.by
        logger.debug(f"Sorting {len(items)} entries: by={by.value}, sensitive={self.params.sensitive}, "
                     f"reverse={self.params.reverse}, dir_first={self.params.dir_first}")

        if by == SortBy.NATURAL:
            self._sort_naturally(items)
            return True

        items.sort(key=cmp_to_key(self.comparator(sizes)))
        return True

    def comparator(self, sizes: Optional[Mapping[str, int]] = None) -> Callable[[File, File], int]:
        """
        Three-way comparison of two entries under the current params.
        `sort` uses it for every criterion except NATURAL, which goes through
        `_sort_naturally` so each entry's comparable text is built only once.
        """
        if sizes is None:
            sizes = {}
        by = self.params.by

        if by == SortBy.NATURAL:
            sensitive = self.params.sensitive
            return lambda a, b: self.compare(
                natural_compare(a.path, b.path, sensitive), 0, self.promote(a, b))

        if by == SortBy.ALPHABETICAL:
            if self.params.sensitive:
                key = lambda f: f.path
            else:
                key = lambda f: f.path.lower()
            return lambda a, b: self.compare(key(a), key(b), self.promote(a, b))

        if by in (SortBy.CREATED, SortBy.MODIFIED):
            attr = "created" if by == SortBy.CREATED else "modified"

            def compare(a: File, b: File) -> int:
                promote = self.promote(a, b)
                aa, bb = getattr(a.meta, attr), getattr(b.meta, attr)
                if aa is None or bb is None:
                    return promote
                return self.compare(aa, bb, promote)
            return compare

        return lambda a, b: self.compare(
            self.resolve_size(a, sizes), self.resolve_size(b, sizes), self.promote(a, b))

    def _sort_naturally(self, items: List[File]) -> None:
        """
        Natural mode: build the comparable text once per entry, sort an index
        permutation against it, then rebuild the list in the new order.
        """
        forms = [natural_form(f.path, self.params.sensitive) for f in items]

        def compare(a: int, b: int) -> int:
            promote = self.promote(items[a], items[b])
            if promote:
                return promote
            ordering = compare_natural_forms(forms[a], forms[b])
            return -ordering if self.params.reverse else ordering

        indices = sorted(range(len(items)), key=cmp_to_key(compare))
        items[:] = [items[i] for i in indices]

    @staticmethod
    def resolve_size(file: File, sizes: Mapping[str, int]) -> int:
        """Aggregate size for directories when known, own length otherwise."""
        if file.is_dir:
            return sizes.get(file.path, file.length)
        return file.length

    def compare(self, a: Any, b: Any, promote: int) -> int:
        """Promotion result if decisive, otherwise the (possibly reversed) key comparison."""
        if promote:
            return promote
        return _cmp(b, a) if self.params.reverse else _cmp(a, b)

    def promote(self, a: File, b: File) -> int:
        """Negative when `a` is a directory and `b` is not, and dir_first is on."""
        if not self.params.dir_first:
            return 0
        return _cmp(b.is_dir, a.is_dir)
