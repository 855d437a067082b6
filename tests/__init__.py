"""Test suite for filename-sanitize.

Test Structure:
- domain/services/: Tests for the individual sanitization steps
- application/: End-to-end tests for the FilenameSanitize builder
- config/: Tests for configuration management
- infrastructure/: Tests for logging utilities
- test_main.py: Tests for the command line interface

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
"""

# This file intentionally kept minimal to avoid import issues with pytest
# Individual test modules are discovered automatically by pytest
__version__ = "0.1.0"
