"""Evaluation of a trained classifier on held-out labelled data."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass
class ClassificationMetrics:
    """Evaluation metrics for a set of predictions.

    Attributes:
        accuracy: Fraction of correct predictions.
        per_class: Label name to ``precision``/``recall``/``f1``.
        macro_f1: Unweighted mean F1 across labels.
        confusion_matrix: ``confusion_matrix[true][predicted]`` counts.
        support: Number of true samples per label.
    """

    accuracy: float = 0.0
    per_class: dict[str, dict[str, float]] = field(default_factory=dict)
    macro_f1: float = 0.0
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    support: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_f1": round(self.macro_f1, 4),
            "per_class": {
                label: {k: round(v, 4) for k, v in scores.items()}
                for label, scores in self.per_class.items()
            },
            "confusion_matrix": self.confusion_matrix,
            "support": self.support,
        }

    def summary(self) -> str:
        """Plain-text report, one row per label."""
        lines = [
            f"Accuracy: {self.accuracy:.2%}",
            f"Macro F1: {self.macro_f1:.4f}",
            "",
            f"{'Label':<20} {'Precision':>10} {'Recall':>10} {'F1':>10} {'Support':>10}",
            "-" * 62,
        ]
        for label, m in self.per_class.items():
            lines.append(
                f"{label:<20} {m['precision']:>10.4f} {m['recall']:>10.4f} "
                f"{m['f1']:>10.4f} {self.support.get(label, 0):>10}"
            )
        return "\n".join(lines)


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else 0.0


def compute_metrics(y_true: list[str], y_pred: list[str]) -> ClassificationMetrics:
    """Compare predicted label names against the truth.

    Labels are reported in order of first appearance in ``y_true``, then
    ``y_pred``.

    Raises:
        ValueError: If the two lists differ in length.
    """
    if len(y_true) != len(y_pred):
        raise ValueError(
            f"y_true ({len(y_true)}) and y_pred ({len(y_pred)}) must have same length"
        )

    labels = list(dict.fromkeys([*y_true, *y_pred]))
    cm = {t: {p: 0 for p in labels} for t in labels}
    for true, pred in zip(y_true, y_pred):
        cm[true][pred] += 1

    per_class: dict[str, dict[str, float]] = {}
    for label in labels:
        tp = cm[label][label]
        predicted = sum(cm[other][label] for other in labels)
        actual = sum(cm[label].values())
        precision = _ratio(tp, predicted)
        recall = _ratio(tp, actual)
        f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
        per_class[label] = {"precision": precision, "recall": recall, "f1": f1}

    correct = sum(cm[label][label] for label in labels)
    return ClassificationMetrics(
        accuracy=_ratio(correct, len(y_true)),
        per_class=per_class,
        macro_f1=sum(m["f1"] for m in per_class.values()) / len(labels) if labels else 0.0,
        confusion_matrix=cm,
        support=dict(Counter(y_true)),
    )
