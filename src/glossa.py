"""Public SDK surface for Glossa.

This module provides a stable import path for library users.
It re-exports the detection entry points, typed models, and errors.
"""

from __future__ import annotations

from core.config import GlossaConfig
from core.errors import (
    DetectorConfigError,
    DuplicateProfileError,
    GlossaError,
    NoFeaturesError,
    NoProfilesLoadedError,
    ProfileFormatError,
    ProfileTableFrozenError,
)
from core.types import DetectorOptions, LanguageProfile, RankedLanguage
from detection.detector import Detector
from detection.facade import LanguageDetectionFacade
from detection.probability_table import ProbabilityTable
from profiles.profile_loader import build_profile, load_profile, load_profiles
from transforms.language_detection import detect_language, detect_languages

__all__ = [
    "Detector",
    "DetectorConfigError",
    "DetectorOptions",
    "DuplicateProfileError",
    "GlossaConfig",
    "GlossaError",
    "LanguageDetectionFacade",
    "LanguageProfile",
    "NoFeaturesError",
    "NoProfilesLoadedError",
    "ProbabilityTable",
    "ProfileFormatError",
    "ProfileTableFrozenError",
    "RankedLanguage",
    "build_profile",
    "detect_language",
    "detect_languages",
    "load_profile",
    "load_profiles",
]
