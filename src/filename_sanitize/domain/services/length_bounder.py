#!/usr/bin/env python3

"""Length limit for the formatted leaf name.

Most filesystems cap a name at 255 bytes (http://serverfault.com/a/9548/44086).
The overflow is measured in UTF-8 bytes but removed from the base name as a
count of code points. Each removed code point frees at least one byte, so
multibyte names may end up a little shorter than the budget.
"""

from collections.abc import Callable

from ...infrastructure.config.sanitize_config import MAX_FILENAME_BYTES
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


def utf8_length(text: str) -> int:
    """Length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def _strip_cut_tail(base: str, keep: int, separator: str) -> str:
    """Cut base at keep, dropping a separator occurrence or a dot split by the cut.

    Only an occurrence that really ends at or straddles the cut is removed,
    so with separator "0" a digit run loses at most one trailing zero.
    """
    bounded = base[:keep]
    if separator:
        for size in range(len(separator), 0, -1):
            start = keep - size
            if start >= 0 and base.startswith(separator, start):
                bounded = bounded[:start]
                break
    if bounded.endswith("."):
        bounded = bounded[:-1]
    return bounded


def bound_base_name(
    base: str,
    formatter: Callable[[str], str],
    max_bytes: int = MAX_FILENAME_BYTES,
    separator: str = "",
) -> str:
    """Shorten base so that formatter(base) fits into max_bytes.

    Only the base name is cut; prefix, suffix, directory slug and extensions
    are expected to fit on their own.

    Args:
        base: Sanitized base name
        formatter: Builds the full leaf name from a base name
        max_bytes: Byte budget for the formatted name
        separator: Separator whose occurrence is removed when the cut ends in one

    Returns:
        base unchanged, or base with its tail removed
    """
    full_length = utf8_length(formatter(base))
    if full_length <= max_bytes:
        return base

    overflow = full_length - max_bytes
    keep = max(len(base) - overflow, 0)
    bounded = _strip_cut_tail(base, keep, separator)

    logger.debug(
        f"Formatted name is {full_length} bytes, cut {len(base) - len(bounded)} "
        f"characters from the base name"
    )
    if keep == 0:
        logger.warning(f"Base name removed entirely to fit {max_bytes} bytes")
    return bounded
