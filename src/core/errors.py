"""Glossa exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class GlossaError(Exception):
    """Base exception for all Glossa failures."""


class GlossaConfigError(GlossaError):
    """Raised for invalid runtime configuration."""


class ProfileFormatError(GlossaError):
    """Raised when a language profile cannot be read or is malformed."""


class DuplicateProfileError(GlossaError):
    """Raised when a language code is registered twice."""


class ProfileTableFrozenError(GlossaError):
    """Raised when registering profiles after detectors were created."""


class NoProfilesLoadedError(GlossaError):
    """Raised when a detector is requested from an empty table."""


class NoFeaturesError(GlossaError):
    """Raised when text contains no n-grams known to the table."""


class DetectorConfigError(GlossaError):
    """Raised for invalid detector options or prior maps."""
