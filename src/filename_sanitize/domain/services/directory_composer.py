#!/usr/bin/env python3

"""Sanitization and reassembly of the directory part of a path."""

import re

from ...infrastructure.logging import get_logger
from ..models import PathSegment, SegmentKind
from .component_sanitizer import DEFAULT_SEPARATOR, sanitize_component
from .path_splitter import PATH_SEPARATORS

logger = get_logger(__name__)

DIRECTORY_MARKERS = frozenset({".", "..", "~"})

_SEGMENT_SPLIT_RE = re.compile(r"[\\/]")


def compose_directory(raw_dir: str, separator: str = DEFAULT_SEPARATOR) -> list[PathSegment]:
    """Break a raw directory into sanitized segments.

    Markers ".", ".." and "~" pass through untouched, every other segment is
    sanitized and dropped when nothing is left of it. A leading path separator
    becomes a ROOT segment so absolute paths stay absolute. A directory of
    exactly "." means the current directory and yields no segments.

    Args:
        raw_dir: Directory as returned by split_path
        separator: Active separator for segment sanitization

    Returns:
        Ordered list of segments
    """
    if not raw_dir or raw_dir == ".":
        return []

    segments: list[PathSegment] = []
    if raw_dir[0] in PATH_SEPARATORS:
        segments.append(PathSegment("", SegmentKind.ROOT))

    for node in _SEGMENT_SPLIT_RE.split(raw_dir):
        if node in DIRECTORY_MARKERS:
            segments.append(PathSegment(node, SegmentKind.MARKER))
            continue
        cleaned = sanitize_component(node, separator)
        if cleaned:
            segments.append(PathSegment(cleaned, SegmentKind.NAME))
        elif node:
            logger.debug(f"Dropping directory segment {node!r}, nothing left after sanitizing")

    return segments


def join_segments(segments: list[PathSegment], directory_separator: str = "/") -> str:
    """Rejoin segments into a directory path without a trailing separator."""
    if not segments:
        return ""
    if len(segments) == 1 and segments[0].kind is SegmentKind.ROOT:
        return directory_separator
    return directory_separator.join(segment.value for segment in segments)


def directory_slug(segments: list[PathSegment], separator: str = DEFAULT_SEPARATOR) -> str:
    """Flatten the named segments into a fragment that can sit inside a filename.

    Root and markers carry no name, so "/../foo/bar" becomes "foo-bar".
    """
    return separator.join(segment.value for segment in segments if segment.is_name)


def append_to_directory(directory: str, name: str, directory_separator: str = "/") -> str:
    """Place name inside directory."""
    if not directory:
        return name
    return f"{directory.rstrip(directory_separator)}{directory_separator}{name}"
