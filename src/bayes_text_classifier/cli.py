"""Command-line interface for the Naive Bayes text classifier.

Provides ``classify``, ``evaluate``, and ``demo`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    bayes-classify classify --data train.tsv "buy dinner now"
    bayes-classify classify --data train.tsv --explain "buy dinner now"
    bayes-classify evaluate --data train.tsv --test held_out.tsv
    bayes-classify demo
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .classifier import ALPHA, BayesianClassifier
from .dataset import Dataset, load_dataset
from .metrics import compute_metrics
from .models import ClassEstimate, ClassificationResult, TrainingSample
from .tokenizer import ALPHABETS, Tokenizer

console = Console()

DEMO_LABELS = ["Spam", "Ham"]
DEMO_SAMPLES = [
    TrainingSample("Предоставляю услуги бухгалтера", 0),
    TrainingSample("Спешите купить iPhone", 0),
    TrainingSample("Надо купить молоко", 1),
]
DEMO_QUERY = "надо купить услуги iPhone"


def _format_score(score: float) -> str:
    return f"{score:.4f}" if score != float("-inf") else "-inf"


def _split_labels(labels: str | None) -> list[str] | None:
    return [name.strip() for name in labels.split(",")] if labels else None


def _load(path: Path, labels: list[str] | None) -> Dataset:
    try:
        return load_dataset(path, labels=labels)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)


def _train(dataset: Dataset, alphabet: str) -> BayesianClassifier:
    if not dataset.labels:
        console.print("[bold red]Error:[/] training data contains no samples")
        sys.exit(1)
    try:
        classifier = BayesianClassifier(dataset.labels, tokenizer=Tokenizer(ALPHABETS[alphabet]))
    except ValueError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)
    classifier.train(dataset.samples)
    return classifier


data_option = click.option(
    "--data", "-d", "data", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Training data (.tsv with label<TAB>text, or .jsonl).",
)
labels_option = click.option(
    "--labels", "-l", default=None,
    help="Comma-separated label order (defaults to order of first appearance).",
)
alphabet_option = click.option(
    "--alphabet", "-a", type=click.Choice(sorted(ALPHABETS)), default="unicode",
    help="Which characters count as letters.",
)


@click.group()
@click.version_option(package_name="bayes-text-classifier")
@click.option("--verbose", "-v", is_flag=True, help="Log training and scoring arithmetic.")
def main(verbose: bool) -> None:
    """Naive Bayes text classifier with Laplace smoothing.

    Train on labelled text and assign one of the labels to new documents.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@main.command()
@click.argument("text")
@data_option
@labels_option
@alphabet_option
@click.option("--explain", "-e", is_flag=True, help="Show every term of every class score.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def classify(
    text: str,
    data: Path,
    labels: str | None,
    alphabet: str,
    explain: bool,
    output: str,
) -> None:
    """Classify TEXT with a model trained on --data.

    Example: bayes-classify classify --data train.tsv "buy dinner now"
    """
    classifier = _train(_load(data, _split_labels(labels)), alphabet)
    result = classifier.predict(text)
    estimates = classifier.explain(text) if explain else []

    if output == "json":
        payload = result.to_dict()
        if explain:
            payload["explain"] = [e.to_dict() for e in estimates]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    _render_result(result, text)
    if explain:
        _render_explanation(estimates)


@main.command()
@data_option
@click.option("--test", "-t", "test_path", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Held-out labelled data to evaluate on.")
@labels_option
@alphabet_option
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def evaluate(
    data: Path,
    test_path: Path,
    labels: str | None,
    alphabet: str,
    output: str,
) -> None:
    """Train on --data and report metrics on --test.

    Example: bayes-classify evaluate --data train.tsv --test held_out.tsv
    """
    train_set = _load(data, _split_labels(labels))
    classifier = _train(train_set, alphabet)
    test_set = _load(test_path, train_set.labels)

    predictions = classifier.classify_batch(test_set.texts)
    metrics = compute_metrics(test_set.label_names, predictions)

    if output == "json":
        click.echo(json.dumps(metrics.to_dict(), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Evaluation: {escape(test_path.name)}")
    table.add_column("Label", style="cyan")
    table.add_column("Precision", justify="right")
    table.add_column("Recall", justify="right")
    table.add_column("F1", justify="right")
    table.add_column("Support", justify="right")
    for label, m in metrics.per_class.items():
        table.add_row(
            escape(label),
            f"{m['precision']:.4f}",
            f"{m['recall']:.4f}",
            f"{m['f1']:.4f}",
            str(metrics.support.get(label, 0)),
        )
    console.print(table)
    console.print(f"Accuracy: [bold]{metrics.accuracy:.2%}[/]  Macro F1: [bold]{metrics.macro_f1:.4f}[/]")


@main.command()
@click.option("--explain", "-e", is_flag=True, help="Show every term of every class score.")
def demo(explain: bool) -> None:
    """Train on the built-in Spam/Ham sample and classify its query."""
    classifier = BayesianClassifier(DEMO_LABELS)
    classifier.train(DEMO_SAMPLES)

    if explain:
        _render_explanation(classifier.explain(DEMO_QUERY))
    console.print(f"Answer: [bold]{escape(classifier.classify(DEMO_QUERY))}[/]")


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_result(result: ClassificationResult, text: str) -> None:
    """Render the decision and per-class scores."""
    table = Table(show_header=True, box=None)
    table.add_column("Label", style="cyan")
    table.add_column("log10 score", justify="right")
    for name, score in result.scores.items():
        style = "bold green" if name == result.label else None
        table.add_row(escape(name), _format_score(score), style=style)

    console.print(Panel(
        table,
        title=f"[bold]{escape(result.label)}[/]",
        subtitle=escape(text[:60]),
        border_style="blue",
    ))


def _render_explanation(estimates: list[ClassEstimate]) -> None:
    """Render the prior and every word term of each class."""
    for estimate in estimates:
        table = Table(title=escape(f"[{estimate.label.name}]"), show_lines=False)
        table.add_column("Term", style="white")
        table.add_column("Expression")
        table.add_column("Value", justify="right")

        table.add_row(
            "prior",
            f"log10({estimate.class_samples} / {estimate.total_samples})",
            _format_score(estimate.log_prior),
        )
        for word in estimate.words:
            table.add_row(
                repr(word.word),
                f"log10(({ALPHA:g} + {word.occurrences}) / {word.denominator})",
                _format_score(word.log_probability),
            )
        table.add_row("[bold]total[/]", "", f"[bold]{_format_score(estimate.score)}[/]")

        console.print(table)
        console.print()


if __name__ == "__main__":
    main()
