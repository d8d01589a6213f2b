from __future__ import annotations

import logging
from typing import Any, Dict, List, Protocol, Tuple


logger = logging.getLogger(__name__)

# Penn Treebank prefixes: NN, NNS, NNP, NNPS / JJ, JJR, JJS
_NOUN_ADJ_PREFIXES = ("N", "J")


class TaggerError(RuntimeError):
    pass


class PosTagger(Protocol):
    def tag(self, phrase: str) -> List[Tuple[str, str]]: ...


def _require_spacy():
    try:
        import spacy  # type: ignore
        return spacy
    except Exception as e:
        raise TaggerError("spaCy is required for POS tagging. Install with: pip install spacy") from e


class SpacyTagger:
    """Penn-tag phrases with a spaCy pipeline.

    The pipeline is loaded on first use and kept for the lifetime of the
    instance; share one instance across a whole evaluation run.
    """

    def __init__(self, model_name: str = "en_core_web_sm") -> None:
        self.model_name = model_name
        self._nlp: Any = None

    @property
    def nlp(self) -> Any:
        if self._nlp is None:
            spacy = _require_spacy()
            try:
                self._nlp = spacy.load(self.model_name)
            except OSError as e:
                raise TaggerError(
                    f"spaCy model '{self.model_name}' is not installed. "
                    f"Install with: python -m spacy download {self.model_name}"
                ) from e
            logger.info("Loaded spaCy model %s", self.model_name)
        return self._nlp

    def tag(self, phrase: str) -> List[Tuple[str, str]]:
        """One (word, tag) pair per whitespace-separated word.

        The spaCy tokenizer is bypassed so hyphenated words stay whole.
        """

        from spacy.tokens import Doc  # type: ignore

        nlp = self.nlp
        doc = Doc(nlp.vocab, words=phrase.split())
        for _, proc in nlp.pipeline:
            doc = proc(doc)
        return [(tok.text, tok.tag_) for tok in doc]


def is_noun_adjective_phrase(tagged: List[Tuple[str, str]]) -> bool:
    """True when every word is noun-like or adjective-like."""

    if not tagged:
        return False
    return all(tag.startswith(_NOUN_ADJ_PREFIXES) for _, tag in tagged)


class PhraseTagCache:
    """Answers "is this a noun/adjective phrase" once per distinct phrase."""

    def __init__(self, tagger: PosTagger) -> None:
        self.tagger = tagger
        self._seen: Dict[str, bool] = {}

    def __call__(self, phrase: str) -> bool:
        hit = self._seen.get(phrase)
        if hit is None:
            hit = is_noun_adjective_phrase(self.tagger.tag(phrase))
            self._seen[phrase] = hit
        return hit
