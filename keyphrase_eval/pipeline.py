from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .config import EvaluationOptions, ModelSpec
from .corpus import Document, load_corpus
from .evaluation import DocumentScorer, PrecisionResult, evaluate
from .ngrams import all_ngrams, generate_ngrams
from .pos import PhraseTagCache, PosTagger, SpacyTagger
from .rake import score_all
from .ranker import DEFAULT_TOP_K
from .text_utils import Stopwords, load_stopwords
from .tfidf import DEFAULT_POS_BOOST, StatisticalScorer


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelResult:
    name: str
    precision: PrecisionResult


def build_candidates(corpus: Sequence[Document], spec: ModelSpec, stopwords: Stopwords) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for doc in corpus:
        if spec.cumulative:
            out[doc.name] = all_ngrams(doc.text, spec.n, stopwords)
        else:
            out[doc.name] = generate_ngrams(doc.text, spec.n, stopwords)
    return out


def build_scorer(
    corpus: Sequence[Document],
    spec: ModelSpec,
    stopwords: Stopwords,
    tagger: Optional[PosTagger] = None,
    pos_boost: float = DEFAULT_POS_BOOST,
) -> DocumentScorer:
    if spec.kind == "rake":
        return lambda doc: score_all(doc.text, stopwords)

    if spec.apply_pos_boost and tagger is None:
        raise ValueError(f"Model {spec.name} applies a POS boost but no tagger was given")

    is_boosted = PhraseTagCache(tagger) if (spec.apply_pos_boost and tagger is not None) else None
    scorer = StatisticalScorer(build_candidates(corpus, spec, stopwords), is_boosted=is_boosted, pos_boost=pos_boost)
    return lambda doc: scorer.score_document(doc.name)


def run_models(
    corpus: Sequence[Document],
    stopwords: Stopwords,
    models: Sequence[ModelSpec],
    top_k: int = DEFAULT_TOP_K,
    tagger: Optional[PosTagger] = None,
    pos_boost: float = DEFAULT_POS_BOOST,
) -> List[ModelResult]:
    results: List[ModelResult] = []
    for spec in models:
        scorer = build_scorer(corpus, spec, stopwords, tagger=tagger, pos_boost=pos_boost)
        precision = evaluate(corpus, scorer, k=top_k)
        logger.info(
            "%s: average %.4f best %.4f worst %.4f",
            spec.name,
            precision.average,
            precision.best,
            precision.worst,
        )
        results.append(ModelResult(name=spec.name, precision=precision))
    return results


def run_evaluation(opts: EvaluationOptions | None = None, tagger: Optional[PosTagger] = None) -> List[ModelResult]:
    """Load the corpus and stopwords named in ``opts`` and run every model.

    A spaCy tagger is created only when some model needs the POS boost and
    none was passed in.
    """

    if opts is None:
        opts = EvaluationOptions()

    stopwords = load_stopwords(opts.stopwords_path)
    corpus = load_corpus(opts.corpus_dir, opts.document_ext, opts.reference_ext)

    if tagger is None and any(m.apply_pos_boost for m in opts.models):
        tagger = SpacyTagger(opts.spacy_model)

    return run_models(corpus, stopwords, opts.models, top_k=opts.top_k, tagger=tagger, pos_boost=opts.pos_boost)
