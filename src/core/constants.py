"""Core constants used across Glossa modules.

This module centralizes detection defaults and file-naming constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_PROFILE_DIR = Path("profiles")
PROFILE_FILE_SUFFIX = ".json"
UNKNOWN_LANGUAGE_CODE = "unknown"
NGRAM_MAX_LENGTH = 3
BOUNDARY_CHAR = " "
DEFAULT_ALPHA = 0.5
DEFAULT_ALPHA_WIDTH = 0.05
DEFAULT_TRIAL_COUNT = 7
DEFAULT_PROB_THRESHOLD = 0.1
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_CONVERGENCE_THRESHOLD = 0.99999
DEFAULT_BASE_FREQUENCY = 10000
DEFAULT_MAX_TEXT_LENGTH = 10000
