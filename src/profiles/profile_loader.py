"""Language profile readers.

This module loads persisted n-gram statistics from JSON files with
``name``, ``freq`` and ``n_words`` fields, one file per language.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from core.constants import NGRAM_MAX_LENGTH, PROFILE_FILE_SUFFIX
from core.errors import ProfileFormatError
from core.logging_config import get_logger
from core.types import LanguageProfile

_LOGGER = get_logger(__name__)


def load_profiles(profile_dir: Path) -> list[LanguageProfile]:
    """Load every JSON profile in a directory.

    Args:
        profile_dir: Directory containing one profile file per language.

    Returns:
        Profiles ordered by file name.

    Raises:
        ProfileFormatError: If the directory is missing, empty, or holds
            an invalid profile.
    """
    if not profile_dir.is_dir():
        raise ProfileFormatError(
            f"Profile directory {profile_dir} does not exist. "
            "Set GLOSSA_PROFILE_DIR or pass --profile-dir."
        )
    profile_paths = sorted(
        path for path in profile_dir.iterdir()
        if path.is_file() and path.suffix.lower() == PROFILE_FILE_SUFFIX
    )
    if not profile_paths:
        raise ProfileFormatError(
            f"No profile files found under {profile_dir}. "
            f"Expected files with suffix {PROFILE_FILE_SUFFIX}."
        )
    profiles = [load_profile(path) for path in profile_paths]
    _LOGGER.info(
        "profiles_loaded",
        profile_dir=str(profile_dir),
        languages=[profile.name for profile in profiles],
    )
    return profiles


def load_profile(profile_path: Path) -> LanguageProfile:
    """Load one JSON language profile.

    Args:
        profile_path: Profile file path.

    Returns:
        Parsed profile.

    Raises:
        ProfileFormatError: If the file cannot be parsed or validated.
    """
    try:
        payload = json.loads(profile_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as error:
        raise ProfileFormatError(f"Failed to read profile {profile_path}: {error}.") from error
    except json.JSONDecodeError as error:
        raise ProfileFormatError(
            f"Failed to parse profile {profile_path}: {error.msg} "
            f"at line {error.lineno}. Fix the JSON syntax."
        ) from error
    if not isinstance(payload, dict):
        raise ProfileFormatError(f"Profile {profile_path} must contain a JSON object.")
    return _parse_profile_payload(payload, str(profile_path))


def build_profile(name: str, freq: Mapping[str, int]) -> LanguageProfile:
    """Build a profile from in-memory counts with computed totals.

    Args:
        name: Language code.
        freq: N-gram counts for n-gram lengths 1 to 3.

    Returns:
        Profile whose ``n_words`` match the supplied counts.
    """
    totals = [0] * NGRAM_MAX_LENGTH
    for ngram, count in freq.items():
        if 1 <= len(ngram) <= NGRAM_MAX_LENGTH:
            totals[len(ngram) - 1] += count
    return LanguageProfile(name=name, freq=dict(freq), n_words=(totals[0], totals[1], totals[2]))


def _parse_profile_payload(payload: dict[str, Any], source: str) -> LanguageProfile:
    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ProfileFormatError(f"Profile {source} is missing a non-empty 'name' string.")
    freq = payload.get("freq")
    if not isinstance(freq, dict):
        raise ProfileFormatError(f"Profile {source} is missing a 'freq' object.")
    for ngram, count in freq.items():
        if not _is_count(count):
            raise ProfileFormatError(
                f"Profile {source} has invalid count {count!r} for n-gram {ngram!r}. "
                "Counts must be non-negative integers."
            )
    n_words = payload.get("n_words")
    if (
        not isinstance(n_words, list)
        or len(n_words) != NGRAM_MAX_LENGTH
        or not all(_is_count(total) for total in n_words)
    ):
        raise ProfileFormatError(
            f"Profile {source} must define 'n_words' as {NGRAM_MAX_LENGTH} "
            "non-negative integers."
        )
    try:
        return LanguageProfile(
            name=name,
            freq=dict(freq),
            n_words=(n_words[0], n_words[1], n_words[2]),
        )
    except ProfileFormatError as error:
        raise ProfileFormatError(f"Invalid profile {source}: {error}") from error


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
