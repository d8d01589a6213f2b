from __future__ import annotations

import pytest

from keyphrase_eval.pos import PhraseTagCache, SpacyTagger, TaggerError, is_noun_adjective_phrase


class FakeTagger:
    def __init__(self, tags: dict[str, str]) -> None:
        self.tags = tags
        self.calls: list[str] = []

    def tag(self, phrase: str) -> list[tuple[str, str]]:
        self.calls.append(phrase)
        return [(w, self.tags.get(w, "NN")) for w in phrase.split()]


def test_noun_and_adjective_tags_accepted() -> None:
    assert is_noun_adjective_phrase([("neural", "JJ"), ("networks", "NNS"), ("Google", "NNP")])


def test_any_other_tag_rejects_phrase() -> None:
    assert not is_noun_adjective_phrase([("model", "NN"), ("runs", "VBZ")])
    assert not is_noun_adjective_phrase([])


def test_cache_tags_each_phrase_once() -> None:
    tagger = FakeTagger({"quickly": "RB"})
    check = PhraseTagCache(tagger)

    assert check("fast model") is True
    assert check("fast model") is True
    assert check("quickly model") is False
    assert tagger.calls == ["fast model", "quickly model"]


def test_spacy_tagger_loads_lazily() -> None:
    tagger = SpacyTagger("no_such_model_xyz")
    assert tagger._nlp is None


def test_spacy_tagger_keeps_hyphenated_words_whole() -> None:
    spacy = pytest.importorskip("spacy")
    tagger = SpacyTagger()
    tagger._nlp = spacy.blank("en")

    tagged = tagger.tag("state-of-the-art model")

    assert [w for w, _ in tagged] == ["state-of-the-art", "model"]
    assert len(tagged) == len("state-of-the-art model".split())


def test_spacy_tagger_missing_model_fails_fast() -> None:
    with pytest.raises(TaggerError):
        SpacyTagger("no_such_model_xyz").tag("cat")
