"""Tests for package name -> index path mapping."""

import pytest

from registry.index_path import get_index_path


class TestGetIndexPath:
    """Test the length-bucketed index layout."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a", "1/a"),
            ("ab", "2/ab"),
            ("ice", "3/i/ice"),
            ("abc", "3/a/abc"),
            ("abcd", "ab/cd/abcd"),
            ("cargo", "ca/rg/cargo"),
            ("abcdefgh", "ab/cd/abcdefgh"),
        ],
    )
    def test_buckets_by_length(self, name, expected):
        assert get_index_path(name) == expected

    def test_lower_cases_name(self):
        assert get_index_path("AbcDefGH") == "ab/cd/abcdefgh"
        assert get_index_path("X") == "1/x"

    def test_keeps_separators(self):
        assert get_index_path("serde_json") == "se/rd/serde_json"
        assert get_index_path("a-b") == "3/a/a-b"

    def test_empty_name_is_caller_error(self):
        with pytest.raises(ValueError):
            get_index_path("")
