#!/usr/bin/env python3

"""Unit tests for directory sanitization and reassembly."""

import pytest

from filename_sanitize.domain.models import PathSegment, SegmentKind
from filename_sanitize.domain.services.directory_composer import (
    append_to_directory,
    compose_directory,
    directory_slug,
    join_segments,
)


def roundtrip(raw_dir: str, separator: str = "-") -> str:
    return join_segments(compose_directory(raw_dir, separator))


class TestComposeDirectory:
    """Test segment classification."""

    @pytest.mark.unit
    def test_empty_and_current_directory(self) -> None:
        """Test that '' and '.' yield no segments."""
        assert compose_directory("") == []
        assert compose_directory(".") == []

    @pytest.mark.unit
    def test_absolute_path_gets_root_segment(self) -> None:
        """Test that a leading separator is kept as ROOT."""
        assert compose_directory("/abs/path") == [
            PathSegment("", SegmentKind.ROOT),
            PathSegment("abs", SegmentKind.NAME),
            PathSegment("path", SegmentKind.NAME),
        ]

    @pytest.mark.unit
    def test_markers_are_verbatim(self) -> None:
        """Test that '.', '..' and '~' are not sanitized."""
        segments = compose_directory("~/../.")
        assert [s.kind for s in segments] == [SegmentKind.MARKER] * 3
        assert [s.value for s in segments] == ["~", "..", "."]

    @pytest.mark.unit
    def test_segments_are_sanitized(self) -> None:
        """Test that ordinary segments go through component sanitization."""
        assert [s.value for s in compose_directory("~dir/-{d}i^r")] == ["dir", "d-i-r"]
        assert [s.value for s in compose_directory("C:/foo")] == ["C", "foo"]

    @pytest.mark.unit
    def test_empty_segments_are_dropped(self) -> None:
        """Test that segments with nothing left disappear."""
        assert compose_directory("dir/|#[") == [PathSegment("dir", SegmentKind.NAME)]
        assert compose_directory("a//b") == [
            PathSegment("a", SegmentKind.NAME),
            PathSegment("b", SegmentKind.NAME),
        ]


class TestJoinSegments:
    """Test rebuilding a directory path."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw_dir, expected",
        [
            ("/abs/path/to/some", "/abs/path/to/some"),
            ("relative/path", "relative/path"),
            ("./../dir", "./../dir"),
            ("~/../..\\dir/..", "~/../../dir/.."),
            ("\\dir\\dir", "/dir/dir"),
            ("<script>alert(1);<", "script-alert-1"),
            ("/", "/"),
            ("", ""),
        ],
    )
    def test_roundtrip(self, raw_dir: str, expected: str) -> None:
        """Test that absolute stays absolute and relative stays relative."""
        assert roundtrip(raw_dir) == expected

    @pytest.mark.unit
    def test_custom_directory_separator(self) -> None:
        """Test joining with backslashes."""
        assert join_segments(compose_directory("/abs/path"), "\\") == "\\abs\\path"

    @pytest.mark.unit
    def test_segments_use_active_separator(self) -> None:
        """Test that segment sanitization follows the active separator."""
        assert roundtrip("my dir/sub dir", "_") == "my_dir/sub_dir"


class TestDirectorySlug:
    """Test flattening a directory into a filename fragment."""

    @pytest.mark.unit
    def test_named_segments_only(self) -> None:
        """Test that root and markers are left out."""
        assert directory_slug(compose_directory("/../foo/bar")) == "foo-bar"
        assert directory_slug(compose_directory("C:/foo/bar")) == "C-foo-bar"

    @pytest.mark.unit
    def test_slug_uses_separator(self) -> None:
        """Test joining with a custom separator."""
        assert directory_slug(compose_directory("foo/bar", "_"), "_") == "foo_bar"

    @pytest.mark.unit
    def test_no_named_segments(self) -> None:
        """Test that a directory of markers gives an empty slug."""
        assert directory_slug(compose_directory("./..")) == ""


class TestAppendToDirectory:
    """Test placing a name inside a directory."""

    @pytest.mark.unit
    def test_append(self) -> None:
        """Test empty, root and nested directories."""
        assert append_to_directory("", "file.zip") == "file.zip"
        assert append_to_directory("/", "file.zip") == "/file.zip"
        assert append_to_directory("a/b", "file.zip") == "a/b/file.zip"
