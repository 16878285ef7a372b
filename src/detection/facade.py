"""One-call language detection over a profile directory.

This module wires profile loading to the probability table so callers
can classify texts without managing detector sessions.
"""

from __future__ import annotations

from pathlib import Path

from core.config import GlossaConfig
from core.types import DetectorOptions, RankedLanguage
from detection.probability_table import ProbabilityTable
from profiles.profile_loader import load_profiles


class LanguageDetectionFacade:
    """Loads all profiles once and detects languages of single texts."""

    def __init__(
        self,
        profile_dir: Path,
        options: DetectorOptions | None = None,
        seed: int | None = None,
    ) -> None:
        self._options = options if options is not None else DetectorOptions()
        self._table = ProbabilityTable(seed=seed)
        self._table.register_all(load_profiles(profile_dir))
        self._table.freeze()

    @classmethod
    def from_config(cls, config: GlossaConfig) -> "LanguageDetectionFacade":
        """Build a facade from runtime configuration.

        Args:
            config: Validated runtime configuration.

        Returns:
            Facade over ``config.profile_dir``.
        """
        return cls(
            config.profile_dir,
            options=DetectorOptions(alpha=config.alpha),
            seed=config.random_seed,
        )

    @property
    def languages(self) -> tuple[str, ...]:
        """Return supported language codes."""
        return self._table.lang_list

    @property
    def table(self) -> ProbabilityTable:
        """Return the underlying probability table."""
        return self._table

    def detect(self, text: str) -> str:
        """Detect the language code of one text.

        Raises:
            NoFeaturesError: If the text has no known n-grams.
        """
        detector = self._table.create_detector(options=self._options)
        detector.append(text)
        return detector.detect()

    def detect_with_probabilities(self, text: str) -> list[RankedLanguage]:
        """Return ranked language probabilities for one text.

        Raises:
            NoFeaturesError: If the text has no known n-grams.
        """
        detector = self._table.create_detector(options=self._options)
        detector.append(text)
        return detector.get_probabilities()
