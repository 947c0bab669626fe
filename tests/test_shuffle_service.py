"""Tests for the word-order shuffle."""

import itertools
import random

from services.shuffle_service import shuffle_words


def test_single_word_is_returned_verbatim():
    rng = random.Random(0)
    assert shuffle_words("hello", rng) == "hello"
    assert shuffle_words("", rng) == ""


def test_shuffle_keeps_the_same_words():
    rng = random.Random(0)
    text = "the quick brown fox jumps over the lazy dog"
    result = shuffle_words(text, rng)
    assert sorted(result.split(" ")) == sorted(text.split(" "))
    assert len(result) == len(text)


def test_double_spaces_keep_empty_words():
    rng = random.Random(3)
    result = shuffle_words("a  b", rng)
    assert sorted(result.split(" ")) == ["", "a", "b"]
    assert len(result) == len("a  b")


def test_no_separator_corruption():
    rng = random.Random(5)
    result = shuffle_words("one, two, three", rng)
    assert sorted(result.split(" ")) == ["one,", "three", "two,"]


def test_every_permutation_eventually_appears():
    rng = random.Random(2024)
    words = ["a", "b", "c"]
    expected = {" ".join(p) for p in itertools.permutations(words)}
    seen = {shuffle_words(" ".join(words), rng) for _ in range(500)}
    assert seen == expected
