"""Randomized Bayesian language estimator.

This module buffers normalized text and ranks candidate languages by
running several independent trials. Each trial starts from a uniform
(or prior) distribution and multiplies in the per-language probability
of randomly drawn n-grams until one language dominates or the
iteration cap is reached. Trial results are averaged.
"""

from __future__ import annotations

import math
import random
from typing import Mapping, Sequence

import numpy as np

from core.constants import UNKNOWN_LANGUAGE_CODE
from core.errors import DetectorConfigError, NoFeaturesError
from core.logging_config import get_logger
from core.types import DetectorOptions, RankedLanguage
from detection.ngram import extract_ngrams, is_ascii_letter, normalize_text
from detection.text_scrubber import collapse_whitespace, strip_urls_and_mail
from detection.unicode_block import is_latin_extended_additional

_LOGGER = get_logger(__name__)
_NON_LATIN_FIRST = "\u3000"


class Detector:
    """Single-session language detector bound to a shared table."""

    def __init__(
        self,
        lang_list: Sequence[str],
        word_lang_prob_map: Mapping[str, np.ndarray],
        options: DetectorOptions,
        randomizer: random.Random | None = None,
    ) -> None:
        validate_detector_options(options)
        self._lang_list = tuple(lang_list)
        self._word_lang_prob_map = word_lang_prob_map
        self._options = options
        self._random = randomizer if randomizer is not None else random.Random()
        self._text = ""
        self._prior: np.ndarray | None = None
        self._lang_prob: np.ndarray | None = None
        self.verbose = False

    @property
    def alpha(self) -> float:
        """Return the base smoothing alpha."""
        return self._options.alpha

    @property
    def options(self) -> DetectorOptions:
        """Return the estimator options."""
        return self._options

    @property
    def text(self) -> str:
        """Return the buffered normalized text."""
        return self._text

    def append(self, text: str) -> None:
        """Append more text to be classified.

        Args:
            text: Raw input text.
        """
        cleaned = normalize_text(strip_urls_and_mail(text))
        combined = collapse_whitespace(self._text + cleaned)
        self._text = combined[: self._options.max_text_length]
        self._lang_prob = None

    def set_prior_map(self, prior_map: Mapping[str, float]) -> None:
        """Set the initial language distribution used by every trial.

        Args:
            prior_map: Language code to prior weight. Unregistered codes
                are ignored.

        Raises:
            DetectorConfigError: If a weight is negative or all are zero.
        """
        prior = np.zeros(len(self._lang_list), dtype=np.float64)
        for index, language in enumerate(self._lang_list):
            if language not in prior_map:
                continue
            weight = float(prior_map[language])
            if weight < 0:
                raise DetectorConfigError(
                    f"Prior probability for '{language}' must be non-negative, got {weight}."
                )
            prior[index] = weight
        total = float(prior.sum())
        if total <= 0:
            raise DetectorConfigError(
                "Prior map assigns no weight to any registered language. "
                f"Registered languages: {', '.join(self._lang_list)}."
            )
        self._prior = prior / total
        self._lang_prob = None

    def detect(self) -> str:
        """Detect the most probable language of the buffered text.

        Returns:
            Language code, or ``unknown`` when no language passes the
            probability threshold.

        Raises:
            NoFeaturesError: If the text has no n-grams known to the table.
        """
        ranked = self.get_probabilities()
        if not ranked:
            return UNKNOWN_LANGUAGE_CODE
        return ranked[0].language

    def get_probabilities(self) -> list[RankedLanguage]:
        """Return languages above the threshold, most probable first.

        Raises:
            NoFeaturesError: If the text has no n-grams known to the table.
        """
        if self._lang_prob is None:
            self._lang_prob = self._estimate()
        return self._rank(self._lang_prob)

    def _estimate(self) -> np.ndarray:
        text = filter_latin_if_non_latin_dominant(self._text)
        ngrams = extract_ngrams(text, self._word_lang_prob_map)
        if not ngrams:
            _LOGGER.info("detection_no_features", text_length=len(self._text))
            raise NoFeaturesError(
                "Text contains no n-grams known to the loaded profiles. "
                "Append more text in a supported language."
            )
        trial_count = self._options.trial_count
        lang_prob = np.zeros(len(self._lang_list), dtype=np.float64)
        for trial_index in range(trial_count):
            prob = self._run_trial(ngrams, trial_index)
            lang_prob += prob / trial_count
        _LOGGER.debug("detection_completed", ngram_count=len(ngrams), trial_count=trial_count)
        return lang_prob

    def _run_trial(self, ngrams: list[str], trial_index: int) -> np.ndarray:
        options = self._options
        prob = self._init_probability()
        alpha = options.alpha + next_gaussian(self._random) * options.alpha_width
        weight = alpha / options.base_frequency
        iterations = 0
        max_probability = 0.0
        while iterations < options.max_iterations:
            ngram = ngrams[self._random.randrange(len(ngrams))]
            prob *= weight + self._word_lang_prob_map[ngram]
            iterations += 1
            max_probability = normalize_prob(prob)
            if max_probability > options.convergence_threshold:
                break
        if self.verbose:
            _LOGGER.info(
                "detection_trial_completed",
                trial=trial_index,
                alpha=round(alpha, 6),
                iterations=iterations,
                max_probability=round(max_probability, 6),
                probabilities=self._format_probabilities(prob),
            )
        return prob

    def _init_probability(self) -> np.ndarray:
        if self._prior is not None:
            return self._prior.copy()
        language_count = len(self._lang_list)
        return np.full(language_count, 1.0 / language_count, dtype=np.float64)

    def _rank(self, lang_prob: np.ndarray) -> list[RankedLanguage]:
        ranked = [
            RankedLanguage(language=language, probability=float(probability))
            for language, probability in zip(self._lang_list, lang_prob)
            if probability > self._options.prob_threshold
        ]
        return sorted(ranked, key=lambda row: row.probability, reverse=True)

    def _format_probabilities(self, prob: np.ndarray) -> str:
        return " ".join(
            f"{language}:{probability:.5f}"
            for language, probability in zip(self._lang_list, prob)
            if probability > 0.00001
        )


def validate_detector_options(options: DetectorOptions) -> None:
    """Validate estimator options.

    Args:
        options: Options to check.

    Raises:
        DetectorConfigError: If any option is out of range.
    """
    if options.alpha < 0:
        raise DetectorConfigError(f"alpha must be non-negative, got {options.alpha}.")
    if options.trial_count < 1:
        raise DetectorConfigError(f"trial_count must be at least 1, got {options.trial_count}.")
    if options.max_iterations < 1:
        raise DetectorConfigError(
            f"max_iterations must be at least 1, got {options.max_iterations}."
        )
    if options.base_frequency <= 0:
        raise DetectorConfigError(
            f"base_frequency must be positive, got {options.base_frequency}."
        )
    if options.max_text_length < 1:
        raise DetectorConfigError(
            f"max_text_length must be at least 1, got {options.max_text_length}."
        )
    if options.alpha_width < 0:
        raise DetectorConfigError(
            f"alpha_width must be non-negative, got {options.alpha_width}."
        )
    if not 0 <= options.prob_threshold < 1:
        raise DetectorConfigError(
            f"prob_threshold must be in [0, 1), got {options.prob_threshold}."
        )
    if not 0 < options.convergence_threshold < 1:
        raise DetectorConfigError(
            "convergence_threshold must be in (0, 1), "
            f"got {options.convergence_threshold}."
        )


def filter_latin_if_non_latin_dominant(text: str) -> str:
    """Drop Latin letters from text dominated by non-Latin script.

    Args:
        text: Normalized text.

    Returns:
        Text without ``A``-``Z``/``a``-``z`` when non-Latin characters
        outnumber Latin letters more than two to one, else the input.
    """
    latin_count = 0
    non_latin_count = 0
    for character in text:
        if is_ascii_letter(character):
            latin_count += 1
        elif character >= _NON_LATIN_FIRST and not is_latin_extended_additional(character):
            non_latin_count += 1
    if latin_count * 2 < non_latin_count:
        return "".join(character for character in text if not is_ascii_letter(character))
    return text


def normalize_prob(prob: np.ndarray) -> float:
    """Normalize a probability vector in place.

    Args:
        prob: Non-negative probability vector.

    Returns:
        Largest component after normalization.
    """
    prob /= prob.sum()
    return float(prob.max())


def next_gaussian(randomizer: random.Random) -> float:
    """Draw a standard normal deviate with the polar Box-Muller method.

    Args:
        randomizer: Source of uniform draws.

    Returns:
        Normally distributed sample with mean 0 and variance 1.
    """
    s = 0.0
    v1 = 0.0
    while s >= 1 or s == 0:
        v1 = 2 * randomizer.random() - 1
        v2 = 2 * randomizer.random() - 1
        s = v1 * v1 + v2 * v2
    return v1 * math.sqrt(-2 * math.log(s) / s)
