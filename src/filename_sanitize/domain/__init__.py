#!/usr/bin/env python3

"""Domain layer containing the sanitization rules and models."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
