"""Tests for the random selection primitives."""

import random
from collections import Counter

import pytest

from pinyin_racer.game.selection import pick_random, prefer_review, sample_distinct, shuffle


class TestPickRandom:
    def test_returns_member(self):
        rng = random.Random(1)
        items = ["a", "b", "c"]
        for _ in range(20):
            assert pick_random(items, rng) in items

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            pick_random([], random.Random(1))

    def test_same_seed_same_choice(self):
        items = list(range(50))
        assert pick_random(items, random.Random(42)) == pick_random(items, random.Random(42))


class TestShuffle:
    def test_in_place_permutation(self):
        items = list(range(10))
        result = shuffle(items, random.Random(3))
        assert result is items
        assert sorted(items) == list(range(10))

    def test_single_and_empty(self):
        assert shuffle([], random.Random(0)) == []
        assert shuffle(["x"], random.Random(0)) == ["x"]

    def test_every_order_of_two_appears(self):
        rng = random.Random(7)
        orders = Counter(tuple(shuffle(["a", "b"], rng)) for _ in range(200))
        assert set(orders) == {("a", "b"), ("b", "a")}


class TestSampleDistinct:
    def test_distinct_values(self):
        picked = sample_distinct(list("abcdef"), 3, random.Random(5))
        assert len(picked) == 3
        assert len(set(picked)) == 3

    def test_short_pool(self):
        assert sorted(sample_distinct(["a", "b"], 5, random.Random(5))) == ["a", "b"]


class TestPreferReview:
    def test_no_review_uses_pool(self):
        rng = random.Random(11)
        for _ in range(20):
            assert prefer_review(["p"], [], rng) == "p"

    def test_probability_one_always_review(self):
        rng = random.Random(11)
        for _ in range(20):
            assert prefer_review(["p"], ["r"], rng, probability=1.0) == "r"

    def test_probability_zero_never_review(self):
        rng = random.Random(11)
        for _ in range(20):
            assert prefer_review(["p"], ["r"], rng, probability=0.0) == "p"
