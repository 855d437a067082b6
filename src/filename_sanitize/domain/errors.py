#!/usr/bin/env python3

"""Errors raised while sanitizing a filename."""


class FilenameSanitizeError(ValueError):
    """Base class for every sanitization failure."""


class InvalidInputError(FilenameSanitizeError):
    """Raw input is unusable: None, empty, "." or ".."."""

    def __init__(self, raw: str | None):
        self.raw = raw
        super().__init__(
            f"Invalid filename {raw!r}. Provide a non-empty name or configure a default filename."
        )


class EmptyResultError(FilenameSanitizeError):
    """Nothing is left of the name after sanitization."""

    def __init__(self, raw: str | None):
        self.raw = raw
        super().__init__(
            f"Filename {raw!r} is empty after sanitization and no default filename is configured."
        )
