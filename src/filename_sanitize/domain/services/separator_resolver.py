#!/usr/bin/env python3

"""Validation of a caller supplied separator."""

from ...infrastructure.logging import get_logger
from .component_sanitizer import DEFAULT_SEPARATOR, UNSAFE_CHARS

logger = get_logger(__name__)

_REJECTED_CHARS = frozenset(UNSAFE_CHARS + ".")


def _is_allowed(char: str) -> bool:
    # Printable ASCII only, so "票" or a NO-BREAK SPACE never become separators
    return " " <= char <= "~" and char not in _REJECTED_CHARS


def _clean(candidate: str) -> str:
    return "".join(char for char in candidate if _is_allowed(char))


def resolve_separator(candidate: str | None, default: str = DEFAULT_SEPARATOR) -> str:
    """Strip forbidden characters from a separator candidate.

    Unlike component sanitization nothing is collapsed: "   ", "___" or "0"
    are valid separators as given. The default goes through the same filter
    and is replaced by "-" when nothing usable is left of it.

    Args:
        candidate: Separator requested by the caller
        default: Separator used when nothing usable is left

    Returns:
        The cleaned separator, or the cleaned default
    """
    fallback = _clean(default) or DEFAULT_SEPARATOR
    if fallback != default:
        logger.debug(f"Default separator {default!r} resolved to {fallback!r}")

    if not candidate:
        return fallback

    resolved = _clean(candidate)
    if not resolved:
        logger.debug(f"Separator {candidate!r} has no usable characters, using {fallback!r}")
        return fallback

    if resolved != candidate:
        logger.debug(f"Separator {candidate!r} resolved to {resolved!r}")
    return resolved
