"""Placeholder text for generated posts."""

from __future__ import annotations

import random

WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua enim ad minim veniam "
    "quis nostrud exercitation ullamco laboris nisi aliquip ex ea commodo "
    "consequat duis aute irure in reprehenderit voluptate velit esse cillum "
    "eu fugiat nulla pariatur excepteur sint occaecat cupidatat non proident "
    "sunt culpa qui officia deserunt mollit anim id est laborum"
).split()


def sentence(rng: random.Random, min_words: int = 4, max_words: int = 10) -> str:
    words = [rng.choice(WORDS) for _ in range(rng.randint(min_words, max_words))]
    return " ".join(words).capitalize() + "."


def paragraphs(rng: random.Random, count: int = 2) -> str:
    return "\n".join(
        " ".join(sentence(rng) for _ in range(rng.randint(3, 6)))
        for _ in range(count)
    )
