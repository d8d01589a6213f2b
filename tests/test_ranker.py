from __future__ import annotations

import pytest

from keyphrase_eval.ranker import rank_phrases, top_k


def test_top_k_returns_highest_scores_first() -> None:
    # regression: ascending order would return the lowest-scoring phrases
    assert top_k({"low": 0.1, "high": 3.0, "mid": 2.0, "lowest": 0.0}, 2) == ["high", "mid"]


@pytest.mark.parametrize("size, expected", [(0, 0), (3, 3), (5, 5), (8, 5)])
def test_result_size_is_min_of_k_and_table(size: int, expected: int) -> None:
    scores = {f"p{i}": float(i) for i in range(size)}
    assert len(top_k(scores)) == expected


def test_ties_keep_insertion_order() -> None:
    assert top_k({"x": 1.0, "y": 1.0, "z": 1.0, "w": 2.0}) == ["w", "x", "y", "z"]


def test_rank_phrases_carries_scores() -> None:
    ranked = rank_phrases({"a": 1, "b": 2}, 1)
    assert len(ranked) == 1
    assert ranked[0].phrase == "b"
    assert ranked[0].score == 2.0


def test_negative_k() -> None:
    with pytest.raises(ValueError):
        top_k({"a": 1.0}, -1)
