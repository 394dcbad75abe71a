"""Word tokenization and normalization.

A token is a maximal run of letter characters, lowercased. What counts as
a letter is decided by an :class:`Alphabet`, injected at construction time
so that training and classification always tokenize identically.

Two alphabets are provided:

- ``UNICODE_ALPHABET`` (default): any Unicode letter, folded with
  ``str.lower`` when that yields a single letter (``İ`` is kept as is).
- ``LEGACY_ALPHABET``: ASCII letters plus the basic Cyrillic block
  (``А``..``я``), the two letter ranges of the single-byte code page the
  classifier was first trained on. Everything else (digits, ``ё``,
  accented Latin) is a delimiter.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from itertools import groupby


# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Alphabet:
    """Character classification and case folding rules.

    Attributes:
        name: Short identifier (used by the CLI ``--alphabet`` option).
        is_word_char: Predicate deciding whether a character is part of a word.
        lower: Maps a word character to its lowercase form.
    """

    name: str
    is_word_char: Callable[[str], bool]
    lower: Callable[[str], str]


def _legacy_is_word_char(ch: str) -> bool:
    return (
        "A" <= ch <= "Z"
        or "a" <= ch <= "z"
        or "А" <= ch <= "я"
    )


def _legacy_lower(ch: str) -> str:
    if "А" <= ch <= "Я":
        return chr(ord(ch) + 0x20)
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 0x20)
    return ch


def _unicode_lower(ch: str) -> str:
    # Multi-character lowercase forms ("İ" -> "i" + U+0307) would split the token
    lowered = ch.lower()
    if len(lowered) == 1 and lowered.isalpha():
        return lowered
    return ch


UNICODE_ALPHABET = Alphabet(name="unicode", is_word_char=str.isalpha, lower=_unicode_lower)
LEGACY_ALPHABET = Alphabet(name="legacy", is_word_char=_legacy_is_word_char, lower=_legacy_lower)

ALPHABETS: dict[str, Alphabet] = {
    UNICODE_ALPHABET.name: UNICODE_ALPHABET,
    LEGACY_ALPHABET.name: LEGACY_ALPHABET,
}


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

class TokenSequence:
    """Lazy, restartable view of the tokens in a text.

    Each iteration rescans the text from the start, so the sequence can be
    consumed any number of times.
    """

    def __init__(self, text: str, alphabet: Alphabet) -> None:
        self._text = text
        self._alphabet = alphabet

    def __iter__(self) -> Iterator[str]:
        is_word_char = self._alphabet.is_word_char
        lower = self._alphabet.lower
        for is_word, run in groupby(self._text, key=is_word_char):
            if is_word:
                yield "".join(lower(ch) for ch in run)

    def __repr__(self) -> str:
        return f"TokenSequence({self._text!r}, alphabet={self._alphabet.name!r})"


@dataclass(frozen=True)
class Tokenizer:
    """Splits text into normalized word tokens.

    Args:
        alphabet: Letter classification and case folding rules.

    Example::

        >>> list(Tokenizer().tokenize("Buy CHEAP watches!"))
        ['buy', 'cheap', 'watches']
    """

    alphabet: Alphabet = UNICODE_ALPHABET

    def is_word_char(self, ch: str) -> bool:
        """Whether ``ch`` belongs to a word."""
        return self.alphabet.is_word_char(ch)

    def normalize(self, ch: str) -> str:
        """Lowercase a single character."""
        return self.alphabet.lower(ch)

    def tokenize(self, text: str) -> TokenSequence:
        """Return the tokens of ``text`` in order of position."""
        return TokenSequence(text, self.alphabet)

    def to_word_set(self, text: str) -> frozenset[str]:
        """Return the distinct tokens of ``text``."""
        return frozenset(self.tokenize(text))


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> TokenSequence:
    """Tokenize with the default (Unicode) alphabet."""
    return _DEFAULT_TOKENIZER.tokenize(text)


def to_word_set(text: str) -> frozenset[str]:
    """Distinct tokens of ``text`` using the default (Unicode) alphabet."""
    return _DEFAULT_TOKENIZER.to_word_set(text)
