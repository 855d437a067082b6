#!/usr/bin/env python3

"""Application layer: the public sanitizer builder."""

from .filename_sanitizer import FilenameSanitize, sanitize_filename

__all__ = [
    "FilenameSanitize",
    "sanitize_filename",
]
