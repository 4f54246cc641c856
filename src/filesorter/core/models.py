"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory listings and their ordering.
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
import os
from enum import Enum

if TYPE_CHECKING:
    from filesorter.config import ManagerSettings


# =============================
# Enums
# =============================

class SortBy(Enum):
    """
    Ordering criterion for a directory listing.
    Values match the vocabulary of the settings file.
    """
    ALPHABETICAL = "alphabetical"
    CREATED = "created"
    MODIFIED = "modified"
    NATURAL = "natural"
    SIZE = "size"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            SortBy.ALPHABETICAL: "Alphabetical",
            SortBy.CREATED: "Created",
            SortBy.MODIFIED: "Modified",
            SortBy.NATURAL: "Natural",
            SortBy.SIZE: "Size",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass
class FileMeta:
    """Timestamps of an entry. None means the platform could not provide it."""
    created: Optional[float] = None
    modified: Optional[float] = None


@dataclass
class File:
    """
    Represents a single entry of a directory listing.
    All flags are precomputed by whoever materializes the entry;
    the sorter only reads them.
    """
    path: str
    length: int = 0  # own size in bytes
    is_dir: bool = False
    is_link: bool = False
    link_to: Optional[str] = None
    is_hidden: bool = False
    meta: FileMeta = field(default_factory=FileMeta)
    name: Optional[str] = None

    def __post_init__(self):
        """Derive basename from path if not provided."""
        if self.name is None:
            self.name = os.path.basename(os.path.normpath(self.path)) or self.path

    def __repr__(self):
        kind = "dir" if self.is_dir else "file"
        return f"<File path={self.path}, {kind}, length={self.length}>"


@dataclass(frozen=True)
class SortParams:
    """
    Immutable snapshot of the four sort parameters.
    Built once per sort call; the sorter never looks anywhere else.
    """
    by: SortBy = SortBy.ALPHABETICAL
    sensitive: bool = True
    reverse: bool = False
    dir_first: bool = True

    def __post_init__(self):
        if not isinstance(self.by, SortBy):
            try:
                by = SortBy(str(self.by).strip().lower())
            except ValueError:
                valid = ", ".join(m.value for m in SortBy)
                raise ValueError(f"Unknown sort mode: '{self.by}'. Valid options: {valid}")
            object.__setattr__(self, "by", by)

        for flag in ("sensitive", "reverse", "dir_first"):
            object.__setattr__(self, flag, bool(getattr(self, flag)))

    @staticmethod
    def from_settings(settings: "ManagerSettings", **overrides) -> "SortParams":
        """
        Factory method that resolves process-wide defaults into a snapshot.
        Keyword overrides set to None are ignored, so CLI flags that were
        not given fall back to the settings value.
        """
        values = {
            "by": settings.sort_by,
            "sensitive": settings.sort_sensitive,
            "reverse": settings.sort_reverse,
            "dir_first": settings.sort_dir_first,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown sort parameter: '{key}'")
            if value is not None:
                values[key] = value
        return SortParams(**values)


@dataclass
class ListingParams:
    """Parameters for a listing operation with validation."""
    root_dir: str
    sort: SortParams = field(default_factory=SortParams)
    show_hidden: bool = False
    dir_sizes: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")
        if not isinstance(self.sort, SortParams):
            raise ValueError("Sort parameters must be a SortParams instance")
