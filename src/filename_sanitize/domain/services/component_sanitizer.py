#!/usr/bin/env python3

"""Character filtering for a single path component.

Every variable piece of a filename (base name, extension, prefix, suffix,
directory nodes) goes through the same pass:

1. filesystem reserved characters  ``< > : " / \\ | ? *``
2. control characters U+0000..U+001F and DEL, NO-BREAK SPACE, SOFT HYPHEN
3. URI reserved characters         ``# [ ] @ ! $ & ' ( ) + , ; =``
4. URL unsafe characters           ``{ } ^ ~ `` ` ``

are replaced with the separator, runs of spaces, underscores and separators
are reduced to one separator, Windows device names are dropped, dots
swallow their neighbouring separators and the edges are trimmed.

Example:
    "file--.--.-.--name" -> "file.name"
    "<script>alert(1);"  -> "script-alert-1"
"""

import re

from ...infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SEPARATOR = "-"

# https://en.wikipedia.org/wiki/Filename#Reserved_characters_and_words
FILESYSTEM_RESERVED_CHARS = '<>:"/\\|?*'
CONTROL_CHARS = "".join(chr(code) for code in range(0x20))
NON_PRINTING_CHARS = "\x7f\xa0\xad"  # DEL, NO-BREAK SPACE, SOFT HYPHEN
# https://www.rfc-editor.org/rfc/rfc3986#section-2.2
URI_RESERVED_CHARS = "#[]@!$&'()+,;="
# https://www.ietf.org/rfc/rfc1738.txt
URL_UNSAFE_CHARS = "{}^~`"

UNSAFE_CHARS = (
    FILESYSTEM_RESERVED_CHARS
    + CONTROL_CHARS
    + NON_PRINTING_CHARS
    + URI_RESERVED_CHARS
    + URL_UNSAFE_CHARS
)


def _char_class(chars: str) -> re.Pattern[str]:
    return re.compile("[" + "".join(re.escape(c) for c in chars) + "]")


# Applied in this order
_REPLACEMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    _char_class(FILESYSTEM_RESERVED_CHARS),
    _char_class(CONTROL_CHARS + NON_PRINTING_CHARS),
    _char_class(URI_RESERVED_CHARS),
    _char_class(URL_UNSAFE_CHARS),
)

_RESERVED_NAMES_RE = re.compile(r"^(?:con|prn|aux|nul|com[0-9]|lpt[0-9])$", re.IGNORECASE)
_MULTIPLE_DOTS_RE = re.compile(r"\.{2,}")


def is_reserved_name(name: str) -> bool:
    """Check whether name is a Windows device name such as CON or LPT1."""
    return _RESERVED_NAMES_RE.match(name) is not None


def _trim_edges(text: str, separator: str) -> str:
    """Strip whitespace and separator characters from both ends and dots from the end.

    Works on the separator's characters, not on the whole string, so a
    separator "ef" also trims a stray "e" or "f" at the edges.
    """
    previous = None
    while text != previous:
        previous = text
        text = text.strip().rstrip("." + separator).strip(separator)
    return text


def sanitize_component(part: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Sanitize one filename component.

    Args:
        part: Raw component, any Unicode text
        separator: Placeholder for removed characters (already resolved)

    Returns:
        Sanitized component, possibly empty
    """
    if not part:
        return ""

    escaped = re.escape(separator)

    def to_separator(_match: re.Match[str]) -> str:
        return separator

    cleaned = part
    for pattern in _REPLACEMENT_PATTERNS:
        cleaned = pattern.sub(to_separator, cleaned)

    # The separator itself is tried first so multi-character separators stay whole
    cleaned = re.sub(f"(?:{escaped}|[ _])+", to_separator, cleaned)
    if not cleaned:
        return ""

    if is_reserved_name(cleaned):
        logger.debug(f"Dropping reserved device name: {cleaned!r}")
        cleaned = separator

    cleaned = re.sub(f"(?:{escaped})*\\.(?:{escaped})*", ".", cleaned)
    cleaned = _MULTIPLE_DOTS_RE.sub(".", cleaned)
    if not cleaned:
        return ""

    cleaned = _trim_edges(cleaned, separator)

    # Trimming can uncover a device name, e.g. "_con_" or "con."
    if is_reserved_name(cleaned):
        logger.debug(f"Dropping reserved device name: {cleaned!r}")
        return ""

    if cleaned != part:
        logger.debug(f"Sanitized component {part!r} -> {cleaned!r}")
    return cleaned
