"""Multinomial Naive Bayes text classifier with Laplace smoothing.

The classifier is constructed with a fixed, ordered set of labels and then
trained on ``(text, class_index)`` samples. Training counts word occurrences
per class and records the size of the global vocabulary; classification
scores every class with

.. code-block:: text

    log10(N_c / N) + sum over distinct query words w of
        log10((ALPHA + count_c(w)) / (|V| + |table_c|))

and returns the highest scoring class. Ties go to the lowest class index.

Everything is pure Python and deterministic: query words are summed in
sorted order, so the score never depends on hash ordering.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional

from .models import (
    ClassEstimate,
    ClassificationResult,
    ClassLabel,
    TrainingSample,
    WordEstimate,
)
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

#: Laplace smoothing constant.
ALPHA = 1.0


class UntrainedModelError(RuntimeError):
    """Raised when classifying with a model that has not been trained."""


class InvalidClassIndexError(IndexError):
    """Raised when a class index is outside ``[0, classes_count)``.

    This signals caller misuse, not bad data, and is not meant to be
    caught and retried.
    """


class BayesianClassifier:
    """Naive Bayes classifier over a fixed set of labels.

    Example::

        classifier = BayesianClassifier(["Spam", "Ham"])
        classifier.train([
            TrainingSample("buy cheap watches", 0),
            TrainingSample("free money now", 0),
            TrainingSample("let's have dinner", 1),
        ])
        classifier.classify("buy dinner now")  # "Spam"

    A trained instance may be shared between readers; ``train`` must not run
    concurrently with any other call on the same instance.

    Args:
        labels: Ordered, non-empty sequence of distinct label names. The
            position of a name is its class index.
        tokenizer: Tokenizer used for both training and queries. Defaults
            to Unicode letter tokenization.

    Raises:
        ValueError: If ``labels`` is empty or contains duplicates.
    """

    def __init__(
        self,
        labels: Sequence[str],
        tokenizer: Optional[Tokenizer] = None,
    ) -> None:
        if isinstance(labels, str):
            raise ValueError("labels must be a sequence of names, not a single string")
        names = list(labels)
        if not names:
            raise ValueError("At least one label is required")
        duplicates = sorted(name for name, n in Counter(names).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate labels: {duplicates}")

        self._labels = tuple(ClassLabel(index, name) for index, name in enumerate(names))
        self._tokenizer = tokenizer or Tokenizer()
        self._trained = False
        self._word_counts: list[Counter[str]] = []
        self._vocabulary_size = 0
        self._samples: list[TrainingSample] = []
        self._class_sample_counts: Counter[int] = Counter()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(labels={list(self.label_names)!r}, "
            f"trained={self._trained}, samples={len(self._samples)})"
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def labels(self) -> tuple[ClassLabel, ...]:
        return self._labels

    @property
    def label_names(self) -> tuple[str, ...]:
        return tuple(label.name for label in self._labels)

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def classes_count(self) -> int:
        return len(self._labels)

    @property
    def samples_count(self) -> int:
        """Number of samples the model was last trained on."""
        return len(self._samples)

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def vocabulary_size(self) -> int:
        """Distinct words seen across all training samples."""
        return self._vocabulary_size

    def samples_of_class_count(self, class_index: int) -> int:
        """Number of training samples labelled with ``class_index``.

        Raises:
            InvalidClassIndexError: If ``class_index`` is out of range.
        """
        self._check_class_index(class_index)
        return self._class_sample_counts[class_index]

    def word_counts(self, class_index: int) -> dict[str, int]:
        """Copy of the word frequency table of a class (empty before training)."""
        self._check_class_index(class_index)
        if not self._trained:
            return {}
        return dict(self._word_counts[class_index])

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, samples: Iterable[TrainingSample]) -> None:
        """Train from scratch, discarding any previous training.

        Args:
            samples: Labelled documents. The list is retained for class
                prior computation.

        Raises:
            InvalidClassIndexError: If any sample's class index is out of
                range. Nothing is modified in that case.
        """
        samples = list(samples)
        for position, sample in enumerate(samples):
            self._check_class_index(sample.class_index, f"sample #{position}")

        word_counts: list[Counter[str]] = [Counter() for _ in self._labels]
        vocabulary: set[str] = set()

        for sample in samples:
            class_counts = word_counts[sample.class_index]
            for token in self._tokenizer.tokenize(sample.text):
                class_counts[token] += 1
                vocabulary.add(token)

        self._samples = samples
        self._class_sample_counts = Counter(sample.class_index for sample in samples)
        self._word_counts = word_counts
        self._vocabulary_size = len(vocabulary)
        self._trained = True

        logger.info(
            "Trained on %d samples across %d classes, vocabulary size %d",
            len(samples),
            self.classes_count,
            self._vocabulary_size,
        )

    # ------------------------------------------------------------------
    # Estimation
    # ------------------------------------------------------------------

    def estimate_log_score(self, class_index: int, query_words: Iterable[str]) -> float:
        """Unnormalized log10 posterior of a class for a set of query words.

        Args:
            class_index: Class to score.
            query_words: Normalized tokens; duplicates are ignored.

        Returns:
            The score, or ``-inf`` if the class has no training samples.

        Raises:
            UntrainedModelError: If the model has not been trained.
            InvalidClassIndexError: If ``class_index`` is out of range.
        """
        self._require_trained()
        self._check_class_index(class_index)
        return self._estimate(class_index, frozenset(query_words)).score

    def explain(self, text: str) -> list[ClassEstimate]:
        """Term-by-term breakdown of the score of every class for ``text``."""
        self._require_trained()
        words = self._tokenizer.to_word_set(text)
        return [self._estimate(label.index, words) for label in self._labels]

    def _estimate(self, class_index: int, words: frozenset[str]) -> ClassEstimate:
        label = self._labels[class_index]
        class_samples = self.samples_of_class_count(class_index)
        total_samples = len(self._samples)

        if class_samples == 0:
            logger.debug("[%s] no training samples, score -inf", label.name)
            return ClassEstimate(label, class_samples, total_samples, -math.inf)

        estimate = ClassEstimate(
            label=label,
            class_samples=class_samples,
            total_samples=total_samples,
            log_prior=math.log10(class_samples / total_samples),
        )
        logger.debug("[%s] log10(%d / %d)", label.name, class_samples, total_samples)

        class_counts = self._word_counts[class_index]
        denominator = self._vocabulary_size + len(class_counts)
        if denominator == 0:
            # No word was ever seen: likelihoods are uniform across classes.
            return estimate

        for word in sorted(words):
            occurrences = class_counts.get(word, 0)
            estimate.words.append(WordEstimate(
                word=word,
                occurrences=occurrences,
                denominator=denominator,
                log_probability=math.log10((ALPHA + occurrences) / denominator),
            ))
            logger.debug(
                "[%s] log10((%s + %d) / (%d + %d)) %r",
                label.name, ALPHA, occurrences,
                self._vocabulary_size, len(class_counts), word,
            )

        logger.debug("[%s] = %s", label.name, estimate.score)
        return estimate

    # ------------------------------------------------------------------
    # Decision
    # ------------------------------------------------------------------

    def predict(self, text: str) -> ClassificationResult:
        """Classify ``text`` and report the score of every class.

        Raises:
            UntrainedModelError: If the model has not been trained.
        """
        estimates = self.explain(text)

        best_score = -math.inf
        best_index = 0
        for estimate in estimates:
            score = estimate.score
            # Strict comparison: the lowest index wins ties.
            if score > best_score:
                best_score = score
                best_index = estimate.label.index

        return ClassificationResult(
            label=self._labels[best_index].name,
            class_index=best_index,
            scores={e.label.name: e.score for e in estimates},
        )

    def class_of(self, text: str) -> int:
        """Index of the most probable class for ``text``.

        Raises:
            UntrainedModelError: If the model has not been trained.
        """
        return self.predict(text).class_index

    def classify(self, text: str) -> str:
        """Name of the most probable class for ``text``.

        Raises:
            UntrainedModelError: If the model has not been trained.
        """
        return self._labels[self.class_of(text)].name

    def classify_batch(self, texts: Iterable[str]) -> list[str]:
        """Classify several documents."""
        return [self.classify(text) for text in texts]

    def scores(self, text: str) -> dict[str, float]:
        """Log10 score of every class for ``text``, keyed by label name."""
        return self.predict(text).scores

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_trained(self) -> None:
        if not self._trained:
            raise UntrainedModelError("Classifier not trained. Call train() first.")

    def _check_class_index(self, class_index: int, context: str = "class index") -> None:
        if (
            isinstance(class_index, bool)
            or not isinstance(class_index, int)
            or not 0 <= class_index < len(self._labels)
        ):
            raise InvalidClassIndexError(
                f"{context}: class index {class_index!r} out of range "
                f"[0, {len(self._labels)})"
            )
