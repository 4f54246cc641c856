"""
Tests for ListingCommand — scan, optional size aggregation and sort in one call.
"""
import pytest
from filesorter.commands import ListingCommand
from filesorter.core.models import ListingParams, SortBy, SortParams


def listed(files):
    return [f.name for f in files if not f.is_link]


class TestListingCommand:
    """End-to-end listing workflow on a real directory."""

    def test_default_listing(self, listing_dir, temp_dir):
        files, sizes = ListingCommand().execute(ListingParams(root_dir=str(temp_dir)))

        assert listed(files) == ["docs", "empty_dir", "file1.txt", "file10.txt", "file2.txt"]
        assert sizes == {}

    def test_natural_listing(self, listing_dir, temp_dir):
        params = ListingParams(root_dir=str(temp_dir), sort=SortParams(by=SortBy.NATURAL))
        files, _ = ListingCommand().execute(params)

        assert listed(files) == ["docs", "empty_dir", "file1.txt", "file2.txt", "file10.txt"]

    def test_size_listing_uses_directory_totals(self, listing_dir, temp_dir):
        params = ListingParams(
            root_dir=str(temp_dir),
            sort=SortParams(by=SortBy.SIZE, reverse=True, dir_first=False),
            dir_sizes=True,
        )
        files, sizes = ListingCommand().execute(params)

        assert sizes[str(listing_dir["docs"])] == 3000
        assert listed(files)[:2] == ["docs", "file10.txt"]
        assert listed(files)[-1] == "empty_dir"

    def test_hidden_entries_follow_show_hidden(self, listing_dir, temp_dir):
        files, _ = ListingCommand().execute(ListingParams(root_dir=str(temp_dir), show_hidden=True))
        assert ".hidden" in listed(files)

    def test_empty_directory(self, temp_dir):
        files, sizes = ListingCommand().execute(ListingParams(root_dir=str(temp_dir), dir_sizes=True))
        assert files == [] and sizes == {}

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(RuntimeError):
            ListingCommand().execute(ListingParams(root_dir=str(temp_dir / "missing")))
