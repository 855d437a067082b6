"""Filename Sanitize - safe, cross-platform filenames from arbitrary path strings."""

from .application import FilenameSanitize, sanitize_filename
from .domain.errors import EmptyResultError, FilenameSanitizeError, InvalidInputError

__all__ = [
    "EmptyResultError",
    "FilenameSanitize",
    "FilenameSanitizeError",
    "InvalidInputError",
    "sanitize_filename",
]
