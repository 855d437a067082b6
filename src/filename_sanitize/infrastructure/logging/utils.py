#!/usr/bin/env python3

"""Logging utility functions."""

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Handlers are attached to the root logger only, by LoggerSetup.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
