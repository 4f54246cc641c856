"""
filesorter — ordering engine for file-browser directory listings.

Core features:
- Five ordering criteria: alphabetical, created, modified, natural, size
- Case-sensitive and case-insensitive text comparison
- Directories-first promotion that the reverse flag never touches
- Size ordering from aggregated directory totals with fallback to own length
- CLI that lists a directory in the configured order
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("filesorter")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from filesorter.commands import ListingCommand
from filesorter.config import ManagerSettings
from filesorter.core import File, FileMeta, FilesSorter, ListingParams, SortBy, SortParams, natural_compare
from filesorter.utils.convert_utils import ConvertUtils
from filesorter.services import SizeService

__all__ = [
    "ListingCommand",
    "ManagerSettings",
    "File",
    "FileMeta",
    "FilesSorter",
    "ListingParams",
    "SortBy",
    "SortParams",
    "natural_compare",
    "ConvertUtils",
    "SizeService",
    "__version__",
]
