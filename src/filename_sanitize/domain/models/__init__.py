#!/usr/bin/env python3

"""Domain models for filename sanitization."""

from .path_parts import PathSegment, SegmentKind, SplitPath

__all__ = [
    "PathSegment",
    "SegmentKind",
    "SplitPath",
]
