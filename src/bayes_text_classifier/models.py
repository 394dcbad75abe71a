"""Data models for Naive Bayes text classification."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassLabel:
    """A class the classifier can assign, identified by its dense index."""

    index: int
    name: str


@dataclass(frozen=True)
class TrainingSample:
    """A labelled training document."""

    text: str
    class_index: int


def _rounded(value: float, ndigits: int = 6) -> float | None:
    # JSON has no infinity
    return round(value, ndigits) if math.isfinite(value) else None


@dataclass
class WordEstimate:
    """Smoothed likelihood term of a single query word within one class.

    ``log10((alpha + occurrences) / denominator)``
    """

    word: str
    occurrences: int
    denominator: int
    log_probability: float

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "occurrences": self.occurrences,
            "denominator": self.denominator,
            "log_probability": _rounded(self.log_probability),
        }


@dataclass
class ClassEstimate:
    """Breakdown of the log10 score of one class for a query.

    Attributes:
        label: The scored class.
        class_samples: Training samples of this class (prior numerator).
        total_samples: Training samples overall (prior denominator).
        log_prior: ``log10(class_samples / total_samples)``; ``-inf`` when
            the class has no samples.
        words: Likelihood terms, in the order they were summed.
    """

    label: ClassLabel
    class_samples: int
    total_samples: int
    log_prior: float
    words: list[WordEstimate] = field(default_factory=list)

    @property
    def score(self) -> float:
        """Sum of the prior and all word terms."""
        total = self.log_prior
        for word in self.words:
            total += word.log_probability
        return total

    def to_dict(self) -> dict:
        return {
            "label": self.label.name,
            "class_samples": self.class_samples,
            "total_samples": self.total_samples,
            "log_prior": _rounded(self.log_prior),
            "words": [w.to_dict() for w in self.words],
            "score": _rounded(self.score),
        }


@dataclass
class ClassificationResult:
    """Result of classifying a single document."""

    label: str
    class_index: int
    scores: dict[str, float]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "class_index": self.class_index,
            "scores": {name: _rounded(score) for name, score in self.scores.items()},
        }
