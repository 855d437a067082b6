#!/usr/bin/env python3

"""Fluent builder that turns a raw path into a safe filename.

Usage:
    FilenameSanitize.of("C:/Photos/My Holiday (1).JPG")
        .with_prefix("img")
        .with_new_extension("webp")
        .keep_directory()
        .get()
    # -> "C/Photos/img-my-holiday-1.webp"

The raw string is split once on construction. Everything else (custom
separator, affixes, default filename) is stored as given and sanitized in
get(), with whatever separator is active at that point.
"""

from typing import Optional

from ..domain.errors import EmptyResultError, InvalidInputError
from ..domain.models import PathSegment, SplitPath
from ..domain.services import (
    NameFormatter,
    append_to_directory,
    bound_base_name,
    compose_directory,
    directory_slug,
    is_invalid_input,
    join_base_directory,
    join_segments,
    resolve_separator,
    sanitize_component,
    split_path,
)
from ..infrastructure.config import get_config
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


class FilenameSanitize:
    """Sanitizes one raw path string into a cross-platform filename."""

    def __init__(self, raw: Optional[str]):
        """
        Split the raw input into its components.

        Unusable input (None, "", "." or "..") is not rejected here; get()
        raises InvalidInputError for it unless a default filename is set.

        Args:
            raw: User supplied path or filename
        """
        self._raw = raw
        self._settings = get_config()
        self._parts: SplitPath | None = None if is_invalid_input(raw) else split_path(raw)

        self._prefix: Optional[str] = None
        self._suffix: Optional[str] = None
        self._new_extension: Optional[str] = None
        self._default_filename: Optional[str] = None
        self._base_directory: Optional[str] = None
        self._separator: Optional[str] = None
        self._keep_old_extension = False
        self._keep_directory = False
        self._embed_directory = False
        self._preserve_case = not self._settings["LOWERCASE"]

    @classmethod
    def of(cls, raw: Optional[str]) -> "FilenameSanitize":
        """Shorthand constructor for chaining."""
        return cls(raw)

    def with_prefix(self, prefix: str) -> "FilenameSanitize":
        self._prefix = prefix
        return self

    def with_suffix(self, suffix: str) -> "FilenameSanitize":
        self._suffix = suffix
        return self

    def with_new_extension(self, extension: str) -> "FilenameSanitize":
        """Replace the original extension ("webp" or ".webp"); an empty string drops it."""
        self._new_extension = extension
        return self

    def with_base_directory(self, base_directory: str) -> "FilenameSanitize":
        """Prepend a trusted directory to the result. It is not sanitized."""
        self._base_directory = base_directory
        return self

    def with_default_filename(self, default_filename: str) -> "FilenameSanitize":
        """Fallback used when the input is unusable or sanitizes to nothing.

        Only the name is replaced; a kept directory and the base directory still apply.
        """
        self._default_filename = default_filename
        return self

    def with_custom_separator(self, separator: str) -> "FilenameSanitize":
        self._separator = separator
        return self

    def keep_old_extension_in_name(self) -> "FilenameSanitize":
        """Append the original extension to the base name, e.g. "photo-jpg.webp"."""
        self._keep_old_extension = True
        return self

    def embed_directory_in_name(self) -> "FilenameSanitize":
        """Put the sanitized directory in front of the base name, e.g. "foo-bar-file.zip"."""
        self._embed_directory = True
        return self

    def keep_directory(self) -> "FilenameSanitize":
        """Keep the sanitized directory in front of the filename."""
        self._keep_directory = True
        return self

    def disable_lowercasing(self) -> "FilenameSanitize":
        self._preserve_case = True
        return self

    def get(self) -> str:
        """
        Build the sanitized path.

        Returns:
            Sanitized filename, prefixed with directories when requested

        Raises:
            InvalidInputError: Raw input is None, "", "." or ".." and no default filename is set
            EmptyResultError: Nothing is left after sanitization and no default filename is set
        """
        separator = resolve_separator(self._separator, self._settings["DEFAULT_SEPARATOR"])
        directory_separator = self._settings["DIRECTORY_SEPARATOR"]

        if self._parts is None:
            if self._default_filename is None:
                raise InvalidInputError(self._raw)
            logger.debug(f"Invalid input {self._raw!r}, using default filename")
            name = self._format_default_filename(separator)
            return join_base_directory(self._base_directory, name, directory_separator)

        segments = compose_directory(self._parts.directory, separator)
        formatter = self._build_formatter(separator, segments)

        base = sanitize_component(self._parts.base, separator)
        base = bound_base_name(base, formatter, self._settings["MAX_FILENAME_BYTES"], separator)
        name = formatter.format(base)

        if not name.strip():
            if self._default_filename is None:
                raise EmptyResultError(self._raw)
            logger.debug(f"Nothing left of {self._raw!r}, using default filename")
            name = self._format_default_filename(separator)

        path = name
        if self._keep_directory:
            path = append_to_directory(
                join_segments(segments, directory_separator), name, directory_separator
            )

        result = join_base_directory(self._base_directory, path, directory_separator)
        logger.debug(f"Sanitized {self._raw!r} -> {result!r}")
        return result

    def _build_formatter(self, separator: str, segments: list[PathSegment]) -> NameFormatter:
        old_extension = sanitize_component(self._parts.extension, separator)
        extension = (
            old_extension
            if self._new_extension is None
            else sanitize_component(self._new_extension.lstrip("."), separator)
        )

        return NameFormatter(
            separator=separator,
            prefix=sanitize_component(self._prefix or "", separator),
            directory_slug=directory_slug(segments, separator) if self._embed_directory else "",
            suffix=sanitize_component(self._suffix or "", separator),
            old_extension=old_extension if self._keep_old_extension else "",
            extension=extension,
            preserve_case=self._preserve_case,
        )

    def _format_default_filename(self, separator: str) -> str:
        default = split_path(self._default_filename or "")
        formatter = NameFormatter(
            separator=separator,
            extension=sanitize_component(default.extension, separator),
            preserve_case=self._preserve_case,
        )
        base = sanitize_component(default.base, separator)
        base = bound_base_name(base, formatter, self._settings["MAX_FILENAME_BYTES"], separator)
        name = formatter.format(base)
        if not name.strip():
            raise EmptyResultError(self._default_filename)
        return name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"


def sanitize_filename(
    raw: Optional[str],
    *,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    extension: Optional[str] = None,
    base_directory: Optional[str] = None,
    default_filename: Optional[str] = None,
    separator: Optional[str] = None,
    keep_old_extension: bool = False,
    keep_directory: bool = False,
    embed_directory: bool = False,
    preserve_case: bool = False,
) -> str:
    """Sanitize raw in one call; keyword arguments map to the builder methods."""
    sanitizer = FilenameSanitize(raw)
    if prefix is not None:
        sanitizer.with_prefix(prefix)
    if suffix is not None:
        sanitizer.with_suffix(suffix)
    if extension is not None:
        sanitizer.with_new_extension(extension)
    if base_directory is not None:
        sanitizer.with_base_directory(base_directory)
    if default_filename is not None:
        sanitizer.with_default_filename(default_filename)
    if separator is not None:
        sanitizer.with_custom_separator(separator)
    if keep_old_extension:
        sanitizer.keep_old_extension_in_name()
    if keep_directory:
        sanitizer.keep_directory()
    if embed_directory:
        sanitizer.embed_directory_in_name()
    if preserve_case:
        sanitizer.disable_lowercasing()
    return sanitizer.get()
