from __future__ import annotations

import re
import string
from pathlib import Path
from typing import FrozenSet, Iterable, List


# ASCII punctuation minus the word-internal "_" and "-".
_PUNCT_CHARS = "".join(c for c in string.punctuation if c not in "_-")
_PUNCT_RUN = re.compile(f"[{re.escape(_PUNCT_CHARS)}]+")

Stopwords = FrozenSet[str]


def normalize_newlines(text: str) -> str:
    """Turn line structure into sentence structure.

    A newline followed by a tab is a wrapped line and becomes a space; any
    other line break ends a sentence.
    """

    text = text.replace("\n\t", " ")
    return text.replace("\r", ".").replace("\n", ".")


def strip_punctuation(text: str, repl: str = "") -> str:
    return _PUNCT_RUN.sub(repl, text)


def split_words(text: str) -> List[str]:
    return text.split()


def split_sentences(text: str) -> List[str]:
    """Split on punctuation runs (keeping "_" and "-" inside words)."""

    units = _PUNCT_RUN.split(normalize_newlines(text))
    return [u for u in units if u.strip()]


def tokenize_words(text: str) -> List[str]:
    """Case-preserving word sequence with punctuation treated as whitespace."""

    return split_words(strip_punctuation(normalize_newlines(text), " "))


def make_stopwords(words: Iterable[str]) -> Stopwords:
    return frozenset(w.strip().lower() for w in words if w.strip())


def load_stopwords(path: str | Path) -> Stopwords:
    """Load a one-word-per-line stopword file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))
    return make_stopwords(path.read_text(encoding="utf-8").splitlines())


def is_stopword(word: str, stopwords: Stopwords) -> bool:
    return word.lower() in stopwords


def remove_stopwords(words: Iterable[str], stopwords: Stopwords) -> List[str]:
    return [w for w in words if not is_stopword(w, stopwords)]
