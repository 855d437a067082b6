#!/usr/bin/env python3

"""Prefixing a sanitized path with a caller supplied base directory."""

import re

_REPEATED_SEPARATORS_RE = re.compile(r"[\\/]{2,}")


def join_base_directory(base_directory: str | None, path: str, directory_separator: str = "/") -> str:
    """Join base_directory and path, collapsing duplicated separators.

    The base directory is trusted and not sanitized; only its slashes are
    normalized to directory_separator.

    Examples:
        >>> join_base_directory("C:/foo/bar\\\\", "\\\\..\\\\dir\\\\file.zip")
        'C:/foo/bar/../dir/file.zip'
    """
    if not base_directory:
        return path

    joined = f"{base_directory}{directory_separator}{path}"
    joined = _REPEATED_SEPARATORS_RE.sub(directory_separator, joined)
    return joined.replace("\\", directory_separator).replace("/", directory_separator)
