"""Tests for brizo.uploaders helpers."""

from __future__ import annotations

import pytest

from brizo.uploaders.common import percent_complete, split_into_batches
from brizo.uploaders.mimetypes import DEFAULT_MIME_TYPE, MIME_TYPES, get_mime_type

# =============================================================================
# split_into_batches Tests
# =============================================================================


class TestSplitIntoBatches:
    """Tests for split_into_batches function."""

    def test_even_split(self):
        assert split_into_batches([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]

    def test_last_batch_smaller(self):
        assert split_into_batches([1, 2, 3, 4, 5], 3) == [[1, 2, 3], [4, 5]]

    def test_batch_larger_than_items(self):
        assert split_into_batches([1, 2], 10) == [[1, 2]]

    def test_empty(self):
        assert split_into_batches([], 3) == []

    def test_non_positive_size_single_batch(self):
        assert split_into_batches([1, 2, 3], 0) == [[1, 2, 3]]

    def test_preserves_order(self):
        items = list(range(10))
        flattened = [x for batch in split_into_batches(items, 4) for x in batch]
        assert flattened == items


class TestPercentComplete:
    """Tests for percent_complete function."""

    @pytest.mark.parametrize(
        ("completed", "total", "expected"),
        [(0, 5, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 200, 1), (5, 5, 100)],
    )
    def test_rounding(self, completed: int, total: int, expected: int):
        assert percent_complete(completed, total) == expected

    def test_half_rounds_up(self):
        assert percent_complete(1, 40) == 3

    def test_empty_total(self):
        assert percent_complete(0, 0) == 100


# =============================================================================
# get_mime_type Tests
# =============================================================================


class TestGetMimeType:
    """Tests for get_mime_type function."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("hello.txt", "text/plain"),
            ("photo.JPG", "image/jpeg"),
            ("archive.tar.gz", MIME_TYPES["gz"]),
            ("report.pdf", "application/pdf"),
        ],
    )
    def test_known_extensions(self, filename: str, expected: str):
        assert get_mime_type(filename) == expected

    @pytest.mark.parametrize("filename", ["Makefile", "data.unknownext", "", ".bashrc"])
    def test_unknown_falls_back(self, filename: str):
        assert get_mime_type(filename) == DEFAULT_MIME_TYPE

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MIME_TYPES["txt"] = "text/x-changed"  # type: ignore[index]
