"""Profile aggregation into the shared probability table.

This module merges per-language n-gram frequencies into one mapping
from n-gram to a per-language probability vector. The table is frozen
when the first detector is created so every detector reads the same
immutable vectors.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import random
from types import MappingProxyType
from typing import Iterable, Mapping

import numpy as np

from core.constants import NGRAM_MAX_LENGTH
from core.errors import DuplicateProfileError, NoProfilesLoadedError, ProfileTableFrozenError
from core.logging_config import get_logger
from core.types import DetectorOptions, LanguageProfile
from detection.detector import Detector

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SharedProbabilityTable:
    """Immutable table shared by reference between detectors.

    Attributes:
        lang_list: Registered language codes in registration order.
        word_lang_prob_map: N-gram to read-only probability vector
            indexed like ``lang_list``.
    """

    lang_list: tuple[str, ...]
    word_lang_prob_map: Mapping[str, np.ndarray]


class ProbabilityTable:
    """Aggregation factory that builds detectors over registered profiles."""

    def __init__(self, seed: int | None = None) -> None:
        self._lang_list: list[str] = []
        self._word_probabilities: dict[str, dict[int, float]] = {}
        self._shared: SharedProbabilityTable | None = None
        self._seed_source = random.Random(seed) if seed is not None else None

    @property
    def lang_list(self) -> tuple[str, ...]:
        """Return registered language codes in registration order."""
        return tuple(self._lang_list)

    @property
    def word_lang_prob_map(self) -> Mapping[str, np.ndarray]:
        """Return n-gram probability vectors sized to the current languages."""
        if self._shared is not None:
            return self._shared.word_lang_prob_map
        return self._build_prob_map()

    @property
    def is_frozen(self) -> bool:
        """Return True once detectors have been created from the table."""
        return self._shared is not None

    def __len__(self) -> int:
        return len(self._lang_list)

    def __contains__(self, language: object) -> bool:
        return language in self._lang_list

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} at {hex(id(self))}: "
            f"{len(self._lang_list)} profile(s)>"
        )

    def register(self, profile: LanguageProfile) -> None:
        """Merge one language profile into the table.

        Args:
            profile: Profile to register.

        Raises:
            ProfileTableFrozenError: If detectors were already created.
            DuplicateProfileError: If the language code is registered.
        """
        if self._shared is not None:
            raise ProfileTableFrozenError(
                f"Cannot register profile '{profile.name}': the probability table is "
                "already shared with detectors. Register all profiles first."
            )
        if profile.name in self._lang_list:
            raise DuplicateProfileError(
                f"Duplicate language profile '{profile.name}'. "
                "Each language code may be registered only once."
            )
        index = len(self._lang_list)
        contributions = _profile_probabilities(profile)
        self._lang_list.append(profile.name)
        for ngram, probability in contributions.items():
            self._word_probabilities.setdefault(ngram, {})[index] = probability
        _LOGGER.debug(
            "profile_registered",
            language=profile.name,
            ngram_count=len(contributions),
        )

    def register_all(self, profiles: Iterable[LanguageProfile]) -> None:
        """Register several profiles in order."""
        for profile in profiles:
            self.register(profile)

    def freeze(self) -> SharedProbabilityTable:
        """Freeze the table and return its shared immutable form.

        Returns:
            Shared table; repeated calls return the same object.
        """
        if self._shared is None:
            self._shared = SharedProbabilityTable(
                lang_list=tuple(self._lang_list),
                word_lang_prob_map=MappingProxyType(self._build_prob_map(read_only=True)),
            )
            self._word_probabilities = {}
            _LOGGER.info(
                "probability_table_frozen",
                language_count=len(self._shared.lang_list),
                ngram_count=len(self._shared.word_lang_prob_map),
            )
        return self._shared

    def create_detector(
        self,
        alpha: float | None = None,
        options: DetectorOptions | None = None,
    ) -> Detector:
        """Create a detector bound to the shared table.

        Args:
            alpha: Optional smoothing alpha overriding ``options.alpha``.
            options: Optional estimator options; defaults when omitted.

        Returns:
            New detector session.

        Raises:
            NoProfilesLoadedError: If no profile was registered.
        """
        if not self._lang_list:
            raise NoProfilesLoadedError(
                "No language profiles are loaded. Register at least one profile "
                "before creating a detector."
            )
        detector_options = options if options is not None else DetectorOptions()
        if alpha is not None:
            detector_options = replace(detector_options, alpha=alpha)
        shared = self.freeze()
        return Detector(
            lang_list=shared.lang_list,
            word_lang_prob_map=shared.word_lang_prob_map,
            options=detector_options,
            randomizer=self._next_randomizer(),
        )

    def _next_randomizer(self) -> random.Random:
        if self._seed_source is None:
            return random.Random()
        return random.Random(self._seed_source.getrandbits(64))

    def _build_prob_map(self, read_only: bool = False) -> dict[str, np.ndarray]:
        language_count = len(self._lang_list)
        prob_map: dict[str, np.ndarray] = {}
        for ngram, probabilities in self._word_probabilities.items():
            vector = np.zeros(language_count, dtype=np.float64)
            for index, probability in probabilities.items():
                vector[index] = probability
            if read_only:
                vector.setflags(write=False)
            prob_map[ngram] = vector
        return prob_map


def _profile_probabilities(profile: LanguageProfile) -> dict[str, float]:
    """Compute relative n-gram frequencies of one profile.

    N-grams with an unsupported length or a zero total are skipped.
    """
    probabilities: dict[str, float] = {}
    for ngram, count in profile.freq.items():
        length = len(ngram)
        if length < 1 or length > NGRAM_MAX_LENGTH:
            continue
        total = profile.n_words[length - 1]
        if total <= 0:
            continue
        probabilities[ngram] = count / total
    return probabilities
