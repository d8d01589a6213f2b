from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Literal, Tuple

import yaml

from .corpus import DOCUMENT_EXT, REFERENCE_EXT
from .ranker import DEFAULT_TOP_K
from .tfidf import DEFAULT_POS_BOOST


ModelKind = Literal["ngram", "rake"]


@dataclass(frozen=True)
class ModelSpec:
    name: str
    kind: ModelKind = "ngram"
    n: int = 1
    # score unigrams..n together instead of n-grams only
    cumulative: bool = False
    apply_pos_boost: bool = False


DEFAULT_MODELS: Tuple[ModelSpec, ...] = (
    ModelSpec("Unigram", n=1),
    ModelSpec("Bigram", n=2),
    ModelSpec("Trigram", n=3),
    ModelSpec("POSTagger", n=3, cumulative=True, apply_pos_boost=True),
    ModelSpec("RAKE", kind="rake"),
)


@dataclass(frozen=True)
class EvaluationOptions:
    corpus_dir: str = "Training"
    stopwords_path: str = "stopwords.txt"
    report_path: str = "report.txt"
    document_ext: str = DOCUMENT_EXT
    reference_ext: str = REFERENCE_EXT
    top_k: int = DEFAULT_TOP_K
    pos_boost: float = DEFAULT_POS_BOOST
    spacy_model: str = "en_core_web_sm"
    models: Tuple[ModelSpec, ...] = field(default=DEFAULT_MODELS)


def _model_from_dict(raw: Dict[str, Any]) -> ModelSpec:
    known = {f.name for f in fields(ModelSpec)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown model option(s): {sorted(unknown)}")
    spec = ModelSpec(**raw)
    if spec.kind not in ("ngram", "rake"):
        raise ValueError(f"Unknown model kind: {spec.kind}")
    if spec.kind == "ngram" and spec.n < 1:
        raise ValueError(f"Model {spec.name}: n must be >= 1")
    return spec


def options_from_dict(raw: Dict[str, Any], base: EvaluationOptions | None = None) -> EvaluationOptions:
    base = base or EvaluationOptions()
    known = {f.name for f in fields(EvaluationOptions)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown option(s): {sorted(unknown)}")

    updates = dict(raw)
    if "models" in updates:
        updates["models"] = tuple(_model_from_dict(dict(m)) for m in updates["models"] or [])
    opts = replace(base, **updates)
    if opts.top_k < 1:
        raise ValueError("top_k must be >= 1")
    return opts


def load_options(path: str | Path) -> EvaluationOptions:
    """Read options from a YAML file; missing keys keep their defaults."""

    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return options_from_dict(raw)
