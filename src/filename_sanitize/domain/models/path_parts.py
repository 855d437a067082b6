#!/usr/bin/env python3

"""Value objects for a decomposed path."""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """How a directory segment is treated when the path is rebuilt."""

    ROOT = "root"  # Leading empty segment of an absolute path
    MARKER = "marker"  # ".", ".." or "~", kept verbatim
    NAME = "name"  # Ordinary segment, sanitized

    def __str__(self) -> str:
        """Return uppercase string representation."""
        return self.value.upper()


@dataclass(frozen=True)
class PathSegment:
    """One node of a directory path."""

    value: str
    kind: SegmentKind

    @property
    def is_name(self) -> bool:
        return self.kind is SegmentKind.NAME


@dataclass(frozen=True)
class SplitPath:
    """Raw directory, base name and extension of an input string."""

    directory: str
    base: str
    extension: str
