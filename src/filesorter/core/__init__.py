"""
Core listing engine — models, natural comparator, sorter and directory scanner.

This package contains the ordering foundation of filesorter:
- FilesSorter: in-place ordering by one of five criteria with directories-first promotion
- natural_compare: digit-aware text comparison
- DirectoryScannerImpl: materializes File entries for one directory
- Models: File, FileMeta, SortBy, SortParams, ListingParams

The sorter and comparator do no I/O and read no global state.
"""

from .models import File, FileMeta, SortBy, SortParams, ListingParams
from .natural import natural_compare, natural_form, compare_natural_forms
from .sorter import FilesSorter
from .scanner import DirectoryScannerImpl

__all__ = [
    "File",
    "FileMeta",
    "SortBy",
    "SortParams",
    "ListingParams",
    "natural_compare",
    "natural_form",
    "compare_natural_forms",
    "FilesSorter",
    "DirectoryScannerImpl",
]
