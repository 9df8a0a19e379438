"""csvnest exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Fatal failures surface as one of these types; recoverable row-level
conditions are logged and accumulated in result objects instead.
"""

from __future__ import annotations


class CsvNestError(Exception):
    """Base exception for all csvnest failures."""


class CsvNestConfigError(CsvNestError):
    """Raised for invalid runtime configuration."""


class CsvNestIngestError(CsvNestError):
    """Raised for unreadable or empty CSV input."""


class CsvNestStoreError(CsvNestError):
    """Raised when a persistence call fails as a whole."""


class CsvNestDependencyError(CsvNestError):
    """Raised when an optional runtime dependency is missing."""
