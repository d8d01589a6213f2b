from __future__ import annotations

from typing import List, Sequence

from .text_utils import Stopwords, is_stopword, split_sentences, split_words, strip_punctuation


def _has_stop_boundary(window: Sequence[str], stopwords: Stopwords) -> bool:
    return is_stopword(window[0], stopwords) or is_stopword(window[-1], stopwords)


def generate_ngrams(text: str, n: int, stopwords: Stopwords) -> List[str]:
    """Candidate phrases of exactly ``n`` words.

    Unigrams come straight from the punctuation-stripped text so that words
    at sentence edges are never lost. Longer n-grams never cross a sentence
    boundary, and a window is dropped when its first or last word is a
    stopword.
    """

    if n < 1:
        raise ValueError(f"n-gram order must be >= 1, got {n}")

    if n == 1:
        words = split_words(strip_punctuation(text))
        return [w for w in words if not is_stopword(w, stopwords)]

    out: List[str] = []
    for sent in split_sentences(text):
        words = split_words(sent)
        for i in range(len(words) - n + 1):
            window = words[i : i + n]
            if _has_stop_boundary(window, stopwords):
                continue
            out.append(" ".join(window))
    return out


def all_ngrams(text: str, max_n: int, stopwords: Stopwords) -> List[str]:
    """Unigrams, bigrams, ... up to ``max_n``, concatenated in that order."""

    out: List[str] = []
    for n in range(1, max_n + 1):
        out.extend(generate_ngrams(text, n, stopwords))
    return out
