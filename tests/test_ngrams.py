from __future__ import annotations

import pytest

from keyphrase_eval.ngrams import all_ngrams, generate_ngrams
from keyphrase_eval.text_utils import make_stopwords


STOP = make_stopwords(["the", "on"])
NONE = make_stopwords([])


def test_unigrams_exclude_stopwords() -> None:
    assert generate_ngrams("the cat sat on the mat", 1, STOP) == ["cat", "sat", "mat"]


def test_bigrams_filter_on_boundary_words() -> None:
    bigrams = generate_ngrams("the cat sat on the mat", 2, STOP)

    assert bigrams == ["cat sat"]
    assert "on the" not in bigrams


def test_stopword_only_inside_window_is_kept() -> None:
    assert generate_ngrams("cat on mat", 3, STOP) == ["cat on mat"]


def test_boundary_filter_is_case_insensitive() -> None:
    assert generate_ngrams("The cat", 2, STOP) == []


def test_last_window_of_sentence_is_included() -> None:
    assert generate_ngrams("alpha beta gamma", 2, NONE) == ["alpha beta", "beta gamma"]


def test_short_sentence_yields_nothing() -> None:
    assert generate_ngrams("a b. c d e", 3, NONE) == ["c d e"]


def test_ngrams_do_not_cross_line_breaks() -> None:
    assert generate_ngrams("alpha beta\ngamma delta", 2, NONE) == ["alpha beta", "gamma delta"]


def test_newline_tab_continues_the_sentence() -> None:
    assert generate_ngrams("alpha beta\n\tgamma", 2, NONE) == ["alpha beta", "beta gamma"]


def test_unigrams_skip_sentence_splitting() -> None:
    assert generate_ngrams("state-of-the-art model_v2 works.", 1, NONE) == [
        "state-of-the-art",
        "model_v2",
        "works",
    ]
    # punctuation is removed, not turned into a boundary
    assert generate_ngrams("cat.dog", 1, NONE) == ["catdog"]


def test_invalid_order() -> None:
    with pytest.raises(ValueError):
        generate_ngrams("cat", 0, NONE)


def test_all_ngrams_concatenates_orders() -> None:
    assert all_ngrams("a b c", 2, NONE) == ["a", "b", "c", "a b", "b c"]
