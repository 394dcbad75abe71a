"""Shared test fixtures for bayes-text-classifier tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bayes_text_classifier import BayesianClassifier, TrainingSample

SPAM = 0
HAM = 1


@pytest.fixture
def spam_ham_samples() -> list[TrainingSample]:
    """Three-sample Spam/Ham training set."""
    return [
        TrainingSample("buy cheap watches", SPAM),
        TrainingSample("free money now", SPAM),
        TrainingSample("let's have dinner", HAM),
    ]


@pytest.fixture
def classifier() -> BayesianClassifier:
    """Untrained Spam/Ham classifier."""
    return BayesianClassifier(["Spam", "Ham"])


@pytest.fixture
def trained(classifier: BayesianClassifier, spam_ham_samples) -> BayesianClassifier:
    """Spam/Ham classifier trained on ``spam_ham_samples``."""
    classifier.train(spam_ham_samples)
    return classifier


@pytest.fixture
def train_tsv(tmp_path: Path) -> Path:
    """Tab-separated training file."""
    file = tmp_path / "train.tsv"
    file.write_text(
        "# label\ttext\n"
        "spam\tbuy cheap watches\n"
        "spam\tfree money now\n"
        "\n"
        "ham\tlet's have dinner\n",
        encoding="utf-8",
    )
    return file


@pytest.fixture
def test_tsv(tmp_path: Path) -> Path:
    """Held-out tab-separated file with the same labels."""
    file = tmp_path / "test.tsv"
    file.write_text(
        "spam\tcheap watches for free\n"
        "ham\tdinner tonight\n",
        encoding="utf-8",
    )
    return file
