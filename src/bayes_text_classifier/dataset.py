"""Loading labelled training data from files.

Two formats are supported:

- Tab-separated text (``.tsv``, ``.txt``): one ``label<TAB>text`` pair per
  line. Blank lines and lines starting with ``#`` are ignored.
- JSON Lines (``.jsonl``, ``.json``): one object per line with ``label``
  and ``text`` keys.

Label names are mapped to class indices in order of first appearance,
unless an explicit label order is supplied.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .models import TrainingSample

TSV_EXTENSIONS = (".tsv", ".txt")
JSONL_EXTENSIONS = (".jsonl", ".json")


@dataclass
class Dataset:
    """Labelled samples ready to be fed to a classifier."""

    labels: list[str] = field(default_factory=list)
    samples: list[TrainingSample] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def texts(self) -> list[str]:
        return [s.text for s in self.samples]

    @property
    def label_names(self) -> list[str]:
        """Label name of every sample, in sample order."""
        return [self.labels[s.class_index] for s in self.samples]


def read_tsv(path: Path) -> list[tuple[str, str]]:
    """Read ``(label, text)`` pairs from a tab-separated file.

    Raises:
        ValueError: If a line has no tab or an empty label.
    """
    pairs: list[tuple[str, str]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            label, sep, text = line.partition("\t")
            label = label.strip()
            if not sep or not label:
                raise ValueError(f"{path}:{lineno}: expected 'label<TAB>text'")
            pairs.append((label, text))
    return pairs


def read_jsonl(path: Path) -> list[tuple[str, str]]:
    """Read ``(label, text)`` pairs from a JSON Lines file.

    Raises:
        ValueError: If a line is not a JSON object with string ``label``
            and ``text`` fields.
    """
    pairs: list[tuple[str, str]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{lineno}: invalid JSON ({e.msg})") from e
            if not isinstance(record, dict):
                raise ValueError(f"{path}:{lineno}: expected a JSON object")
            label = record.get("label")
            text = record.get("text")
            if not isinstance(label, str) or not label.strip() or not isinstance(text, str):
                raise ValueError(f"{path}:{lineno}: 'label' and 'text' must be strings")
            pairs.append((label.strip(), text))
    return pairs


def load_dataset(
    path: str | Path,
    labels: Optional[Sequence[str]] = None,
) -> Dataset:
    """Load a labelled dataset, choosing the reader by file extension.

    Args:
        path: TSV or JSON Lines file.
        labels: Optional explicit label order. When given, every label in
            the file must be one of these; otherwise labels are indexed in
            order of first appearance.

    Returns:
        Dataset with label names and samples.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On unsupported extensions, malformed lines or unknown
            labels.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TSV_EXTENSIONS:
        pairs = read_tsv(path)
    elif suffix in JSONL_EXTENSIONS:
        pairs = read_jsonl(path)
    else:
        raise ValueError(
            f"Unsupported file extension '{path.suffix}'. "
            f"Supported: {TSV_EXTENSIONS + JSONL_EXTENSIONS}"
        )

    fixed = labels is not None
    names: list[str] = list(labels) if fixed else []
    index = {name: i for i, name in enumerate(names)}

    samples: list[TrainingSample] = []
    for label, text in pairs:
        if label not in index:
            if fixed:
                raise ValueError(f"{path}: unknown label {label!r}. Known: {names}")
            index[label] = len(names)
            names.append(label)
        samples.append(TrainingSample(text=text, class_index=index[label]))

    return Dataset(labels=names, samples=samples)
