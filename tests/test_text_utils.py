from __future__ import annotations

import pytest

from keyphrase_eval.text_utils import (
    is_stopword,
    load_stopwords,
    make_stopwords,
    normalize_newlines,
    remove_stopwords,
    split_sentences,
    strip_punctuation,
    tokenize_words,
)


def test_normalize_newlines_joins_wrapped_lines() -> None:
    assert normalize_newlines("alpha\n\tbeta\ngamma") == "alpha beta.gamma"


def test_split_sentences_keeps_hyphen_and_underscore() -> None:
    assert split_sentences("state-of-the-art model_v2, works\nnext") == [
        "state-of-the-art model_v2",
        " works",
        "next",
    ]


def test_split_sentences_drops_blank_units() -> None:
    assert split_sentences("...\n\n") == []


def test_strip_punctuation() -> None:
    assert strip_punctuation("a.b, (c)-d_e!") == "ab c-d_e"


def test_tokenize_words_treats_punctuation_as_space() -> None:
    assert tokenize_words("Quick, brown-fox.\nLazy dog!") == ["Quick", "brown-fox", "Lazy", "dog"]


def test_load_stopwords_casefolds_and_skips_blanks(tmp_path) -> None:
    path = tmp_path / "stopwords.txt"
    path.write_text("The\n\n  on \nAND\n", encoding="utf-8")

    sw = load_stopwords(path)

    assert sw == frozenset({"the", "on", "and"})
    assert is_stopword("THE", sw)
    assert not is_stopword("cat", sw)


def test_load_stopwords_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_stopwords(tmp_path / "missing.txt")


def test_remove_stopwords_preserves_case_and_order() -> None:
    sw = make_stopwords(["the", "on"])
    assert remove_stopwords(["The", "Cat", "sat", "on", "the", "cat"], sw) == ["Cat", "sat", "cat"]
