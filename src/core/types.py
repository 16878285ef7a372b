"""Shared typed models.

This module defines immutable data models used by profile loading,
probability aggregation, detection, and the SDK surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from core.constants import (
    DEFAULT_ALPHA,
    DEFAULT_ALPHA_WIDTH,
    DEFAULT_BASE_FREQUENCY,
    DEFAULT_CONVERGENCE_THRESHOLD,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_PROB_THRESHOLD,
    DEFAULT_TRIAL_COUNT,
    NGRAM_MAX_LENGTH,
)
from core.errors import ProfileFormatError


@dataclass(frozen=True)
class LanguageProfile:
    """N-gram frequency statistics for one language.

    Attributes:
        name: Language code, e.g. ``en``.
        freq: N-gram to occurrence count for n-gram lengths 1 to 3.
        n_words: Total occurrences for n-gram lengths 1, 2 and 3.
    """

    name: str
    freq: Mapping[str, int]
    n_words: tuple[int, int, int]

    def __post_init__(self) -> None:
        """Freeze counts and check totals against per-length sums.

        Raises:
            ProfileFormatError: If ``n_words`` does not hold one total per
                n-gram length or a total differs from the summed counts.
        """
        object.__setattr__(self, "freq", MappingProxyType(dict(self.freq)))
        object.__setattr__(self, "n_words", tuple(self.n_words))
        if len(self.n_words) != NGRAM_MAX_LENGTH:
            raise ProfileFormatError(
                f"Profile '{self.name}' must define {NGRAM_MAX_LENGTH} n-gram totals, "
                f"got {len(self.n_words)}."
            )
        sums = [0] * NGRAM_MAX_LENGTH
        for ngram, count in self.freq.items():
            if 1 <= len(ngram) <= NGRAM_MAX_LENGTH:
                sums[len(ngram) - 1] += count
        for length, (total, expected) in enumerate(zip(self.n_words, sums), 1):
            if total != expected:
                raise ProfileFormatError(
                    f"Profile '{self.name}' declares {total} {length}-grams "
                    f"but its counts sum to {expected}."
                )


@dataclass(frozen=True)
class RankedLanguage:
    """One detection result row.

    Attributes:
        language: Language code.
        probability: Averaged posterior probability.
    """

    language: str
    probability: float

    def __str__(self) -> str:
        return f"{self.language}:{self.probability:.5f}"


@dataclass(frozen=True)
class DetectorOptions:
    """Tunable parameters of the probability estimator.

    Attributes:
        alpha: Base additive smoothing value.
        alpha_width: Standard deviation of the per-trial alpha perturbation.
        trial_count: Number of independent randomized trials.
        prob_threshold: Minimum probability for a language to be reported.
        max_iterations: Iteration cap for one trial.
        convergence_threshold: Max-component value that ends a trial early.
        base_frequency: Divisor applied to alpha in each update.
        max_text_length: Maximum number of buffered characters.
    """

    alpha: float = DEFAULT_ALPHA
    alpha_width: float = DEFAULT_ALPHA_WIDTH
    trial_count: int = DEFAULT_TRIAL_COUNT
    prob_threshold: float = DEFAULT_PROB_THRESHOLD
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    convergence_threshold: float = DEFAULT_CONVERGENCE_THRESHOLD
    base_frequency: int = DEFAULT_BASE_FREQUENCY
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
