"""
services/shuffle_service.py
---------------------------
"Rephrases" free text by shuffling its word order.
"""

import random

WORD_SEPARATOR = " "


def shuffle_words(text: str, rng: random.Random) -> str:
    """
    Return ``text`` with its words in a uniformly random order.

    Words are separated by single spaces only; consecutive spaces yield
    empty words, which are shuffled like any other so the rejoined text
    keeps the same length. Text with at most one word is returned as is.
    """
    words = text.split(WORD_SEPARATOR)
    if len(words) <= 1:
        return text
    rng.shuffle(words)
    return WORD_SEPARATOR.join(words)
