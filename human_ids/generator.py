"""Assembling human-readable identifiers from random words."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from human_ids.words import ADJECTIVES, ADVERBS, NOUNS, VERBS

DEFAULT_SEPARATOR = "-"


def random_word(words: Sequence[str]) -> str:
    """Return a randomly chosen element of ``words``."""
    if not words:
        raise ValueError("cannot choose from an empty sequence")
    return random.choice(words)


def longest(words: Sequence[str]) -> str:
    """Return the longest word; on ties the last one wins. Empty input gives ''."""
    return max(reversed(words), key=len, default="")


def shortest(words: Sequence[str]) -> str:
    """Return the shortest word; on ties the first one wins. Empty input gives ''."""
    return min(words, key=len, default="")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


@dataclass(frozen=True)
class Options:
    """How an identifier is put together."""

    separator: str | None = None
    capitalize: bool = True
    add_adverb: bool = False
    adjective_count: int = 1

    def __post_init__(self) -> None:
        if self.adjective_count < 0:
            raise ValueError("adjective_count must not be negative")


def generate(options: Options | None = None) -> str:
    """Generate an identifier: adjectives, a noun, a verb and optionally an adverb."""
    options = options or Options()

    words = [random_word(ADJECTIVES) for _ in range(options.adjective_count)]
    words.append(random_word(NOUNS))
    words.append(random_word(VERBS))
    if options.add_adverb:
        words.append(random_word(ADVERBS))

    if options.capitalize:
        words = [_capitalize(word) for word in words]

    separator = DEFAULT_SEPARATOR if options.separator is None else options.separator
    return separator.join(words)