"""Runtime configuration model for Glossa.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_ALPHA, DEFAULT_PROFILE_DIR
from core.errors import GlossaConfigError


@dataclass(frozen=True)
class GlossaConfig:
    """Validated runtime configuration.

    Attributes:
        profile_dir: Directory holding one JSON profile per language.
        alpha: Smoothing alpha used by created detectors.
        random_seed: Optional seed for reproducible detection runs.
    """

    profile_dir: Path
    alpha: float
    random_seed: int | None

    @classmethod
    def from_env(cls) -> "GlossaConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GlossaConfigError: If environment values are invalid.
        """
        profile_dir_value = os.getenv("GLOSSA_PROFILE_DIR", str(DEFAULT_PROFILE_DIR))
        alpha = _parse_alpha(os.getenv("GLOSSA_ALPHA", str(DEFAULT_ALPHA)))
        random_seed = _parse_random_seed(os.getenv("GLOSSA_RANDOM_SEED"))
        return cls(
            profile_dir=Path(profile_dir_value).expanduser().resolve(),
            alpha=alpha,
            random_seed=random_seed,
        )


def _parse_alpha(raw_value: str) -> float:
    """Parse the smoothing alpha environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative float.

    Raises:
        GlossaConfigError: If value is not a non-negative number.
    """
    try:
        alpha = float(raw_value)
    except ValueError as error:
        raise GlossaConfigError(
            "Invalid GLOSSA_ALPHA value: "
            f"expected number, got '{raw_value}'. "
            "Set GLOSSA_ALPHA to a numeric value such as 0.5."
        ) from error
    if alpha < 0:
        raise GlossaConfigError(
            f"Invalid GLOSSA_ALPHA value: expected non-negative number, got {alpha}."
        )
    return alpha


def _parse_random_seed(raw_value: str | None) -> int | None:
    """Parse the optional random seed environment value.

    Args:
        raw_value: Raw string from environment, or None when unset.

    Returns:
        Parsed integer seed, or None.

    Raises:
        GlossaConfigError: If value cannot be parsed into int.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return int(raw_value)
    except ValueError as error:
        raise GlossaConfigError(
            "Invalid GLOSSA_RANDOM_SEED value: "
            f"expected integer, got '{raw_value}'. "
            "Set GLOSSA_RANDOM_SEED to a numeric value or leave it unset."
        ) from error
