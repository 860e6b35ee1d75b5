import random

import pytest

from human_ids.generator import Options, generate, longest, random_word, shortest
from human_ids.words import ADJECTIVES, ADVERBS, NOUNS, VERBS


def test_random_word_is_member():
    words = ["a", "b", "c"]
    for _ in range(50):
        assert random_word(words) in words


def test_random_word_empty_raises():
    with pytest.raises(ValueError):
        random_word([])


def test_longest_example():
    assert longest(["a", "ab", "abc"]) == "abc"


def test_shortest_example():
    assert shortest(["a", "ab", "abc"]) == "a"


def test_longest_and_shortest_empty():
    assert longest([]) == ""
    assert shortest([]) == ""


def test_ties():
    assert longest(["ab", "cd"]) == "cd"
    assert shortest(["ab", "cd"]) == "ab"


def test_longest_shortest_on_word_lists():
    for words in (ADJECTIVES, NOUNS, VERBS, ADVERBS):
        assert all(len(longest(words)) >= len(w) for w in words)
        assert all(len(shortest(words)) <= len(w) for w in words)


def test_default_generation_is_capitalized_with_dash():
    parts = generate().split("-")
    assert len(parts) == 3
    assert all(part[0].isupper() for part in parts)
    assert parts[0].lower() in ADJECTIVES
    assert parts[1].lower() in NOUNS
    assert parts[2].lower() in VERBS


def test_none_separator_falls_back_to_dash():
    result = generate(Options(separator=None, capitalize=False))
    assert len(result.split("-")) == 3


def test_custom_separator_and_lowercase():
    result = generate(Options(separator="_", capitalize=False))
    adjective, noun, verb = result.split("_")
    assert adjective in ADJECTIVES
    assert noun in NOUNS
    assert verb in VERBS


@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_adjective_count(count):
    parts = generate(Options(separator=" ", capitalize=False, adjective_count=count)).split(" ")
    assert len(parts) == count + 2
    assert all(p in ADJECTIVES for p in parts[:count])
    assert parts[count] in NOUNS
    assert parts[count + 1] in VERBS


def test_adverb_is_last():
    parts = generate(Options(separator="-", capitalize=False, add_adverb=True)).split("-")
    assert len(parts) == 4
    assert parts[3] in ADVERBS


def test_negative_adjective_count_rejected():
    with pytest.raises(ValueError):
        Options(adjective_count=-1)


def test_same_seed_gives_same_id():
    random.seed(42)
    first = generate(Options(adjective_count=3, add_adverb=True))
    random.seed(42)
    second = generate(Options(adjective_count=3, add_adverb=True))
    assert first == second


def test_options_defaults():
    options = Options()
    assert options.separator is None
    assert options.capitalize is True
    assert options.add_adverb is False
    assert options.adjective_count == 1