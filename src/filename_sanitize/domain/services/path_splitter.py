#!/usr/bin/env python3

"""Decomposition of a raw path string into directory, base name and extension."""

from ..models import SplitPath

PATH_SEPARATORS = "/\\"

# Raw values that name no file at all
INVALID_NAMES = frozenset({"", ".", ".."})


def is_invalid_input(raw: str | None) -> bool:
    """Check whether raw input is None, empty, "." or ".."."""
    return raw is None or raw in INVALID_NAMES


def split_path(raw: str) -> SplitPath:
    """Split a raw path on its last path separator and its leaf on the last dot.

    Both "/" and "\\" are path separators; the returned directory uses "/".
    A leaf whose only dot is its first character has no extension, so
    ".github" is a base name.

    Examples:
        >>> split_path("C:\\\\dir\\\\file.tar.gz")
        SplitPath(directory='C:/dir', base='file.tar', extension='gz')

        >>> split_path("/.env")
        SplitPath(directory='/', base='.env', extension='')
    """
    normalized = raw.replace("\\", "/")
    directory, slash, leaf = normalized.rpartition("/")
    if slash and not directory:
        directory = "/"

    dot = leaf.rfind(".")
    if dot > 0:
        return SplitPath(directory=directory, base=leaf[:dot], extension=leaf[dot + 1 :])
    return SplitPath(directory=directory, base=leaf, extension="")
