from mistake_analyser.alignment import align_tokens
from mistake_analyser.models import AlignmentOp, OpKind
from mistake_analyser.rendering import render_diff
from mistake_analyser.tokenization import tokenize
from mistake_analyser.windowing import make_context_window

TOKENS = ["a", "b", "c", "d", "e", "f", "g", "h"]


def test_context_window_collects_tokens_on_both_sides():
    window = make_context_window(TOKENS, 4)

    assert window.before == "b c d"
    assert window.after == "f g h"


def test_context_window_is_clamped_to_sequence_bounds():
    assert make_context_window(TOKENS, 0).before == ""
    assert make_context_window(TOKENS, 0).after == "b c d"
    assert make_context_window(TOKENS, 7).before == "e f g"
    assert make_context_window(TOKENS, 7).after == ""
    assert make_context_window([], 0).before == ""


def test_context_window_size_and_truncation():
    assert make_context_window(TOKENS, 4, window_size=1).before == "d"
    long_tokens = ["x" * 100, "y" * 100, "pivot", "z" * 100, "w" * 100]
    window = make_context_window(long_tokens, 2)

    assert len(window.before) == 120
    assert len(window.after) == 120
    assert window.before.startswith("x")


def test_render_diff_of_identical_sequences_has_no_markers():
    tokens = tokenize("el perro corre")

    assert render_diff(align_tokens(tokens, tokens)) == "el perro corre"


def test_render_diff_marks_replacements_inserts_and_deletes():
    ops = [
        AlignmentOp(OpKind.EQUAL, "el", "el", 0, 0),
        AlignmentOp(OpKind.REPLACE, "corre", "corren", 1, 1),
        AlignmentOp(OpKind.DELETE, "muy", None, 2, 2),
        AlignmentOp(OpKind.INSERT, None, "rápido", 3, 2),
    ]

    assert render_diff(ops) == "el [-corre-]{+corren+} [-muy-] {+rápido+}"


def test_render_diff_spaces_interior_punctuation():
    tokens = tokenize("Hola, amigo.")

    assert render_diff(align_tokens(tokens, tokens)) == "Hola , amigo ."


def test_render_diff_joins_without_spaces_when_first_fragment_is_punctuation():
    ops = align_tokens(tokenize("¡Hola amigo!"), tokenize("¡Hola amiga!"))

    assert render_diff(ops) == "¡Hola[-amigo-]{+amiga+}!"


def test_render_diff_of_no_ops_is_empty():
    assert render_diff([]) == ""
