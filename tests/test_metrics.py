"""Tests for evaluation metrics."""

from __future__ import annotations

import pytest

from bayes_text_classifier import ClassificationMetrics, compute_metrics


class TestComputeMetrics:
    def test_perfect_predictions(self) -> None:
        m = compute_metrics(["spam", "ham", "spam"], ["spam", "ham", "spam"])
        assert m.accuracy == 1.0
        assert m.macro_f1 == 1.0
        assert m.support == {"spam": 2, "ham": 1}

    def test_per_class_scores(self) -> None:
        y_true = ["spam", "spam", "ham", "ham"]
        y_pred = ["spam", "ham", "ham", "ham"]
        m = compute_metrics(y_true, y_pred)
        assert m.accuracy == 0.75
        assert m.per_class["spam"]["precision"] == 1.0
        assert m.per_class["spam"]["recall"] == 0.5
        assert m.per_class["ham"]["precision"] == pytest.approx(2 / 3)
        assert m.per_class["ham"]["recall"] == 1.0
        assert m.per_class["spam"]["f1"] == pytest.approx(2 / 3)

    def test_confusion_matrix(self) -> None:
        m = compute_metrics(["a", "a", "b"], ["a", "b", "b"])
        assert m.confusion_matrix == {"a": {"a": 1, "b": 1}, "b": {"a": 0, "b": 1}}

    def test_label_only_predicted(self) -> None:
        m = compute_metrics(["a"], ["b"])
        assert list(m.per_class) == ["a", "b"]
        assert m.per_class["b"] == {"precision": 0.0, "recall": 0.0, "f1": 0.0}
        assert m.accuracy == 0.0

    def test_empty(self) -> None:
        m = compute_metrics([], [])
        assert m.accuracy == 0.0
        assert m.macro_f1 == 0.0

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            compute_metrics(["a"], [])

    def test_to_dict_and_summary(self) -> None:
        m = compute_metrics(["spam", "ham"], ["spam", "spam"])
        data = m.to_dict()
        assert data["accuracy"] == 0.5
        assert set(data["per_class"]) == {"spam", "ham"}
        summary = m.summary()
        assert "Accuracy: 50.00%" in summary
        assert "spam" in summary

    def test_default_instance(self) -> None:
        assert ClassificationMetrics().to_dict()["accuracy"] == 0.0
