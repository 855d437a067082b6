#!/usr/bin/env python3

"""Domain services layer."""

from .base_directory_joiner import join_base_directory
from .component_sanitizer import sanitize_component
from .directory_composer import (
    append_to_directory,
    compose_directory,
    directory_slug,
    join_segments,
)
from .length_bounder import bound_base_name, utf8_length
from .name_formatter import NameFormatter
from .path_splitter import is_invalid_input, split_path
from .separator_resolver import resolve_separator

__all__ = [
    "NameFormatter",
    "append_to_directory",
    "bound_base_name",
    "compose_directory",
    "directory_slug",
    "is_invalid_input",
    "join_base_directory",
    "join_segments",
    "resolve_separator",
    "sanitize_component",
    "split_path",
    "utf8_length",
]
