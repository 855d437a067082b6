#!/usr/bin/env python3

"""Unit tests for the 255 byte limit on the formatted name."""

import pytest

from filename_sanitize.domain.services.length_bounder import bound_base_name, utf8_length
from filename_sanitize.domain.services.name_formatter import NameFormatter


class TestWithinBudget:
    """Names that already fit."""

    @pytest.mark.unit
    def test_short_name_unchanged(self) -> None:
        """Test that a short base name is returned as is."""
        assert bound_base_name("file-name", NameFormatter(extension="zip")) == "file-name"

    @pytest.mark.unit
    def test_exactly_at_budget(self) -> None:
        """Test the boundary: 251 characters plus '.zip'."""
        base = "a" * 251
        assert bound_base_name(base, NameFormatter(extension="zip")) == base


class TestTruncation:
    """Names that exceed the budget."""

    @pytest.mark.unit
    def test_ascii_digits(self, long_digits: str) -> None:
        """Test that 300 digits plus '.zip' are cut to exactly 255 bytes."""
        formatter = NameFormatter(extension="zip")
        bounded = bound_base_name(long_digits, formatter)

        assert bounded == long_digits[:251]
        assert utf8_length(formatter(bounded)) == 255
        assert formatter(bounded).endswith(".zip")

    @pytest.mark.unit
    def test_affixes_are_preserved(self, long_digits: str) -> None:
        """Test that only the base name loses characters."""
        formatter = NameFormatter(prefix="prefix", suffix="suffix", extension="zip")
        name = formatter(bound_base_name(long_digits, formatter))

        assert utf8_length(name) == 255
        assert name.startswith("prefix-1234")
        assert name.endswith("-suffix.zip")

    @pytest.mark.unit
    def test_multibyte_overflow_cut_as_code_points(self) -> None:
        """Test that the byte overflow is removed as a count of characters.

        100 CJK characters are 300 bytes, 304 with '.zip'. The overflow of 49
        bytes removes 49 characters, which leaves 157 bytes.
        """
        formatter = NameFormatter(extension="zip")
        bounded = bound_base_name("火" * 100, formatter)

        assert bounded == "火" * 51
        assert utf8_length(formatter(bounded)) == 157

    @pytest.mark.unit
    def test_affixes_larger_than_budget(self) -> None:
        """Test that the base name is removed entirely when affixes alone overflow."""
        formatter = NameFormatter(prefix="p" * 300)
        assert bound_base_name("abc", formatter) == ""

    @pytest.mark.unit
    def test_cut_does_not_end_on_separator(self) -> None:
        """Test that a separator left at the cut is stripped."""
        base = "a" * 250 + "-" + "b" * 10
        formatter = NameFormatter(extension="zip")

        assert bound_base_name(base, formatter) == "a" * 250 + "-"
        assert bound_base_name(base, formatter, separator="-") == "a" * 250

    @pytest.mark.unit
    def test_cut_removes_one_separator_occurrence(self) -> None:
        """Test that a separator made of ordinary characters only loses the split occurrence."""
        base = "a" * 248 + "100" + "b" * 10
        formatter = NameFormatter(separator="0", extension="zip")

        assert bound_base_name(base, formatter, separator="0") == "a" * 248 + "10"

    @pytest.mark.unit
    def test_cut_inside_multi_character_separator(self) -> None:
        """Test that a partially cut separator is removed entirely."""
        base = "a" * 249 + "_--" + "b" * 10
        formatter = NameFormatter(separator="_--", extension="zip")

        assert bound_base_name(base, formatter, separator="_--") == "a" * 249

    @pytest.mark.unit
    def test_cut_before_separator_keeps_text(self) -> None:
        """Test that nothing else is removed when the cut misses the separator."""
        base = "a" * 252 + "-" + "b" * 10
        formatter = NameFormatter(extension="zip")

        assert bound_base_name(base, formatter, separator="-") == "a" * 251

    @pytest.mark.unit
    def test_cut_drops_trailing_dot(self) -> None:
        """Test that a dot left at the cut is removed."""
        base = "a" * 250 + "." + "b" * 10
        formatter = NameFormatter(extension="zip")

        assert bound_base_name(base, formatter, separator="-") == "a" * 250

    @pytest.mark.unit
    def test_custom_budget(self) -> None:
        """Test a smaller byte budget."""
        assert bound_base_name("abcdef", lambda base: base, max_bytes=3) == "abc"
