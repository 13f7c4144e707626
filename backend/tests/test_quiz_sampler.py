"""Unit tests for quiz sampling: size bounds, no duplicates, independence of draws, rough uniformity."""
import random
from collections import Counter

import pytest

from quizbank.services.quiz import DEFAULT_QUIZ_SIZE, draw_quiz, sample_questions


def test_sample_takes_five_distinct_when_enough():
    items = list(range(20))
    out = sample_questions(items, 5, random.Random(1))
    assert len(out) == 5
    assert len(set(out)) == 5
    assert set(out) <= set(items)


def test_sample_returns_all_when_fewer_than_size():
    items = ["a", "b", "c"]
    out = sample_questions(items, 5, random.Random(2))
    assert sorted(out) == items


def test_sample_empty_is_empty():
    assert sample_questions([], 5) == []


def test_sample_does_not_mutate_input():
    items = [1, 2, 3, 4, 5, 6]
    sample_questions(items, 5, random.Random(3))
    assert items == [1, 2, 3, 4, 5, 6]


def test_sample_negative_size_rejected():
    with pytest.raises(ValueError):
        sample_questions([1, 2], -1)


def test_sample_is_not_biased_by_position():
    """Each of 6 items is chosen ~5/6 of the time and leads the draw ~1/6 of the time."""
    rng = random.Random(12345)
    items = list(range(6))
    picked, first = Counter(), Counter()
    runs = 6000
    for _ in range(runs):
        out = sample_questions(items, 5, rng)
        picked.update(out)
        first[out[0]] += 1
    for i in items:
        assert abs(picked[i] / runs - 5 / 6) < 0.03
        assert abs(first[i] / runs - 1 / 6) < 0.03


def test_small_pool_order_is_shuffled():
    """With 3 items every order shows up over repeated draws."""
    rng = random.Random(7)
    orders = {tuple(sample_questions(["a", "b", "c"], 5, rng)) for _ in range(300)}
    assert len(orders) == 6


def test_draw_quiz_reads_only_the_subject():
    class FakeStore:
        def __init__(self):
            self.asked = []

        def list_by_subject(self, subject_id):
            self.asked.append(subject_id)
            return [f"{subject_id}-{i}" for i in range(8)]

    store = FakeStore()
    out = draw_quiz(store, "INF222", rng=random.Random(0))
    assert store.asked == ["INF222"]
    assert len(out) == DEFAULT_QUIZ_SIZE
    assert all(q.startswith("INF222-") for q in out)
