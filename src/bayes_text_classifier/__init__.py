"""Bayes Text Classifier -- multinomial Naive Bayes with Laplace smoothing."""

__version__ = "0.1.0"

from .classifier import (
    ALPHA,
    BayesianClassifier,
    InvalidClassIndexError,
    UntrainedModelError,
)
from .dataset import Dataset, load_dataset
from .metrics import ClassificationMetrics, compute_metrics
from .models import (
    ClassEstimate,
    ClassificationResult,
    ClassLabel,
    TrainingSample,
    WordEstimate,
)
from .tokenizer import (
    LEGACY_ALPHABET,
    UNICODE_ALPHABET,
    Alphabet,
    Tokenizer,
    TokenSequence,
    to_word_set,
    tokenize,
)

__all__ = [
    # Core
    "BayesianClassifier",
    "ALPHA",
    "UntrainedModelError",
    "InvalidClassIndexError",
    # Models
    "ClassLabel",
    "TrainingSample",
    "ClassificationResult",
    "ClassEstimate",
    "WordEstimate",
    # Tokenization
    "Tokenizer",
    "TokenSequence",
    "Alphabet",
    "UNICODE_ALPHABET",
    "LEGACY_ALPHABET",
    "tokenize",
    "to_word_set",
    # Data and evaluation
    "Dataset",
    "load_dataset",
    "ClassificationMetrics",
    "compute_metrics",
]
