import itertools

from mistake_analyser.distance import levenshtein


def test_levenshtein_known_values():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("corre", "corren") == 1
    assert levenshtein("perro", "perro") == 0


def test_levenshtein_degenerate_inputs():
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "") == 0
    assert levenshtein(None, "ab") == 2


def test_levenshtein_is_symmetric_and_obeys_triangle_inequality():
    words = ["gato", "gatos", "pato", "", "hablar", "habló"]
    for a, b in itertools.product(words, repeat=2):
        assert levenshtein(a, b) == levenshtein(b, a)
    for a, b, c in itertools.product(words, repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)
