from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping


DEFAULT_TOP_K = 5


@dataclass(frozen=True)
class ScoredPhrase:
    phrase: str
    score: float


def rank_phrases(scores: Mapping[str, float], k: int = DEFAULT_TOP_K) -> List[ScoredPhrase]:
    """Highest-scoring ``k`` phrases, best first.

    The sort is stable, so equal scores keep the table's insertion order.
    """

    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    ordered = sorted(scores.items(), key=lambda x: x[1], reverse=True)
    return [ScoredPhrase(phrase=p, score=float(s)) for p, s in ordered[: min(k, len(ordered))]]


def top_k(scores: Dict[str, float], k: int = DEFAULT_TOP_K) -> List[str]:
    return [sp.phrase for sp in rank_phrases(scores, k)]
