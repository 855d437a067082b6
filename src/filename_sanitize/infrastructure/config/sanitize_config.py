#!/usr/bin/env python3

"""Defaults for the sanitization pipeline."""

import os

ENV_PREFIX = "FILENAME_SANITIZE_"

# http://serverfault.com/a/9548/44086
MAX_FILENAME_BYTES = 255

# Default configuration values
DEFAULT_CONFIG = {
    # Placeholder for removed characters, filtered like a custom separator
    "DEFAULT_SEPARATOR": "-",

    # Budget for the formatted leaf name, in UTF-8 bytes (1 to 255)
    "MAX_FILENAME_BYTES": MAX_FILENAME_BYTES,

    # Separator emitted between directory segments ("/" or "\")
    "DIRECTORY_SEPARATOR": "/",

    # Fold the leaf name to lowercase unless disabled per request
    "LOWERCASE": True,
}


def _is_valid(key: str, value: object) -> bool:
    if key == "MAX_FILENAME_BYTES":
        return 0 < value <= MAX_FILENAME_BYTES
    if key == "DIRECTORY_SEPARATOR":
        return value in ("/", "\\")
    return True


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden with ``FILENAME_SANITIZE_<KEY>``. Values that
    cannot be parsed or fall outside their allowed range keep the default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if not env_value:
            continue
        # Convert to appropriate type
        if isinstance(config[key], bool):
            value = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                value = int(env_value)
            except ValueError:
                continue
        else:
            value = env_value

        if _is_valid(key, value):
            config[key] = value

    return config
