from __future__ import annotations

from typing import AbstractSet, Dict, List, Sequence

from .ranker import ScoredPhrase, rank_phrases
from .text_utils import Stopwords, remove_stopwords, split_sentences, split_words, tokenize_words


def content_words(words: Sequence[str], stopwords: Stopwords) -> List[str]:
    return remove_stopwords(words, stopwords)


def word_degree(word: str, words: Sequence[str], content: AbstractSet[str]) -> float:
    """Degree/frequency ratio from a local adjacency tally.

    Every time ``word`` is the left element of an adjacent pair it counts
    once, and once more under the right-hand word when that word is a
    content word. The word's own key holds the left-element count.
    """

    pairs: Dict[str, int] = {}
    counter = 0
    for left, right in zip(words, words[1:]):
        if left != word:
            continue
        if right in content:
            pairs[right] = pairs.get(right, 0) + 1
        counter += 1

    # only ever seen as the last word of the text
    if counter == 0:
        return 1.0

    pairs[word] = counter
    return sum(pairs.values()) / counter


def content_phrases(text: str, content: AbstractSet[str]) -> List[str]:
    """Runs of consecutive content words inside each punctuation-delimited unit."""

    out: List[str] = []
    for unit in split_sentences(text):
        words = split_words(unit)
        if len(words) == 1:
            if words[0] in content:
                out.append(words[0])
            continue

        buff: List[str] = []
        for w in words:
            if w in content:
                buff.append(w)
            elif buff:
                out.append(" ".join(buff))
                buff = []
        if buff:
            out.append(" ".join(buff))
    return out


def score_all(text: str, stopwords: Stopwords) -> Dict[str, float]:
    """RAKE score table for one document, in first-occurrence order."""

    words = tokenize_words(text)
    content = set(content_words(words, stopwords))

    degree: Dict[str, float] = {}
    for w in words:
        if w in content and w not in degree:
            degree[w] = word_degree(w, words, content)

    scores: Dict[str, float] = {}
    for phrase in content_phrases(text, content):
        parts = [p for p in phrase.split(" ") if p]
        if len(parts) == 1:
            scores[phrase] = degree[parts[0]]
        else:
            scores[phrase] = sum(degree[p] for p in parts)
    return scores


def extract_rake_phrases(text: str, stopwords: Stopwords, top_k: int = 15) -> List[ScoredPhrase]:
    return rank_phrases(score_all(text, stopwords), top_k)
