#!/usr/bin/env python3

"""Logging infrastructure for the application."""

from .logger_setup import LoggerSetup
from .progress_tracker import ProgressTracker
from .utils import get_logger

__all__ = [
    "LoggerSetup",
    "ProgressTracker",
    "get_logger",
]
