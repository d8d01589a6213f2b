from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Sequence, Tuple

from .corpus import Document
from .ranker import DEFAULT_TOP_K, top_k


logger = logging.getLogger(__name__)

DocumentScorer = Callable[[Document], Dict[str, float]]


@dataclass(frozen=True)
class PrecisionResult:
    average: float
    best: float
    worst: float
    per_document: Tuple[float, ...] = ()


def document_precision(keywords: Sequence[str], reference: Iterable[str]) -> float:
    """Share of ``keywords`` found (case-insensitively) in ``reference``."""

    if not keywords:
        return 0.0
    ref = {r.lower() for r in reference}
    matches = sum(1 for kw in keywords if kw.lower() in ref)
    return matches / len(keywords)


def aggregate(precisions: Sequence[float]) -> PrecisionResult:
    if not precisions:
        raise ValueError("cannot aggregate precision over an empty corpus")
    return PrecisionResult(
        average=sum(precisions) / len(precisions),
        best=max(precisions),
        worst=min(precisions),
        per_document=tuple(precisions),
    )


def evaluate(corpus: Sequence[Document], scorer: DocumentScorer, k: int = DEFAULT_TOP_K) -> PrecisionResult:
    """Score every document, keep its top ``k`` phrases and compare to its reference."""

    precisions = []
    for doc in corpus:
        keywords = top_k(scorer(doc), k)
        p = document_precision(keywords, doc.reference)
        logger.debug("%s: precision %.3f with %s", doc.name, p, keywords)
        precisions.append(p)
    return aggregate(precisions)
