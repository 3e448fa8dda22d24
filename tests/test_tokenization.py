from mistake_analyser.tokenization import is_punctuation, tokenize


def test_tokenize_splits_words_and_spanish_punctuation():
    tokens = tokenize("¿Cómo estás?  Bien, gracias.")

    assert tokens == ["¿", "Cómo", "estás", "?", "Bien", ",", "gracias", "."]


def test_tokenize_keeps_digits_and_repeated_punctuation():
    assert tokenize("Año 2024...") == ["Año", "2024", ".", ".", "."]


def test_tokenize_keeps_combining_marks_inside_words():
    decomposed = "este\u0301 aqui\u0301"
    assert tokenize(decomposed) == ["este\u0301", "aqui\u0301"]


def test_tokenize_treats_underscore_and_apostrophe_as_punctuation():
    assert tokenize("foo_bar l'eau") == ["foo", "_", "bar", "l", "'", "eau"]


def test_tokenize_empty_inputs():
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []
    assert tokenize(None) == []


def test_is_punctuation():
    assert is_punctuation(",")
    assert is_punctuation("¿")
    assert is_punctuation("“")
    assert not is_punctuation("—")
    assert not is_punctuation("a")
    assert not is_punctuation("")
    assert not is_punctuation(None)


def test_tokenize_keeps_marks_from_any_script_inside_words():
    assert tokenize("ka\u0951r sha\u05b8lom") == ["ka\u0951r", "sha\u05b8lom"]


def test_tokenize_treats_byte_order_mark_as_whitespace():
    assert tokenize("\ufeffHola amigo") == ["Hola", "amigo"]
    assert tokenize("Hola\ufeffamigo") == ["Hola", "amigo"]
    assert tokenize("\ufeff") == []
