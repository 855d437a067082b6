#!/usr/bin/env python3

"""Composition of the final leaf name.

Format::

    prefix-[directory-slug-]base-suffix-[old-extension].extension

Every part is already sanitized; empty parts are skipped together with the
separator that would join them.
"""

from dataclasses import dataclass

from .component_sanitizer import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class NameFormatter:
    """Formats a base name with the configured affixes."""

    separator: str = DEFAULT_SEPARATOR
    prefix: str = ""
    directory_slug: str = ""
    suffix: str = ""
    old_extension: str = ""
    extension: str = ""
    preserve_case: bool = False

    def format(self, base: str) -> str:
        """Build the leaf name around base.

        Args:
            base: Sanitized, possibly truncated, base name

        Returns:
            Formatted name, case folded unless preserve_case is set
        """
        parts = (self.prefix, self.directory_slug, base, self.suffix, self.old_extension)
        name = self.separator.join(part for part in parts if part)
        if self.extension:
            name = f"{name}.{self.extension}"

        if self.preserve_case:
            return name
        # Lowercase for windows/unix interoperability
        return name.casefold()

    def __call__(self, base: str) -> str:
        return self.format(base)
