from __future__ import annotations

import math
from typing import Callable, Dict, List, Mapping, Optional, Sequence


DEFAULT_POS_BOOST = 1.66


class ScoringError(ValueError):
    pass


def term_frequency(phrase: str, candidates: Sequence[str]) -> float:
    """ln(1 + count), counting exact matches in the candidate list."""

    count = sum(1 for c in candidates if c == phrase)
    return math.log(1 + count)


def relative_position(phrase: str, candidates: Sequence[str]) -> float:
    """Offset of the first occurrence in the space-joined candidates, over its length.

    This is a plain substring search, so it can land inside a longer token.
    """

    joined = " ".join(candidates)
    idx = joined.find(phrase)
    if idx < 0:
        raise ScoringError(f"phrase {phrase!r} does not occur in its document")
    return idx / len(joined)


class StatisticalScorer:
    """tf * idf * relpos scorer over a fixed corpus of candidate lists.

    ``corpus`` maps document name to that document's candidate phrases, in
    corpus order. Containment sets for the document-frequency count are
    built once here; everything per-document is rebuilt on each call.

    When ``is_boosted`` is given, phrases it accepts have their score
    multiplied by ``pos_boost``.
    """

    def __init__(
        self,
        corpus: Mapping[str, List[str]],
        is_boosted: Optional[Callable[[str], bool]] = None,
        pos_boost: float = DEFAULT_POS_BOOST,
    ) -> None:
        if not corpus:
            raise ScoringError("cannot build a scorer over an empty corpus")
        self.corpus = corpus
        self.is_boosted = is_boosted
        self.pos_boost = pos_boost
        self._doc_sets = [frozenset(c) for c in corpus.values()]

    def document_frequency(self, phrase: str) -> int:
        return sum(1 for s in self._doc_sets if phrase in s)

    def idf(self, phrase: str) -> float:
        df = self.document_frequency(phrase)
        if df == 0:
            raise ScoringError(f"phrase {phrase!r} does not occur in any corpus document")
        return math.log(len(self._doc_sets) / df)

    def score(self, phrase: str, candidates: Sequence[str]) -> float:
        """tf * idf * relpos for one phrase of a document in this corpus."""

        return term_frequency(phrase, candidates) * self.idf(phrase) * relative_position(phrase, candidates)

    def score_document(self, name: str) -> Dict[str, float]:
        candidates = self.corpus[name]
        if not candidates:
            return {}

        scores: Dict[str, float] = {}
        for phrase in dict.fromkeys(candidates):
            score = self.score(phrase, candidates)
            if self.is_boosted is not None and self.is_boosted(phrase):
                score *= self.pos_boost
            scores[phrase] = score
        return scores
