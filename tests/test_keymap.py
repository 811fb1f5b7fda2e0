import pytest

from edinit.core.keymap import KeyChord, Keymap, KeySequence


def test_parse_sequence_of_chords():
    sequence = KeySequence.parse("C-c x")

    assert sequence.chords == (KeyChord("c", frozenset({"C"})), KeyChord("x"))
    assert str(sequence) == "C-c x"


def test_modifier_order_is_canonical():
    assert KeySequence.parse("M-C-x") == KeySequence.parse("C-M-x")
    assert str(KeySequence.parse("s-M-C-<return>")) == "C-M-s-<return>"


@pytest.mark.parametrize("text, key, modifiers", [
    ("C--", "-", {"C"}),
    ("<f5>", "<f5>", set()),
    ("C-<", "<", {"C"}),
    ("M-x", "x", {"M"}),
])
def test_parse_chord_edge_cases(text, key, modifiers):
    chord = KeyChord.parse(text)
    assert chord.key == key
    assert chord.modifiers == frozenset(modifiers)


@pytest.mark.parametrize("text", ["", "   ", "<f5", "C-<>", "C-", "C-M-", "C-x M-"])
def test_malformed_sequences_raise(text):
    with pytest.raises(ValueError):
        KeySequence.parse(text)


def test_bind_returns_replaced_command():
    keymap = Keymap()

    assert keymap.bind("C-c x", "first") is None
    assert keymap.bind("C-c x", "second") == "first"
    assert keymap.lookup(KeySequence.parse("C-c x")) == "second"


def test_unbind():
    keymap = Keymap()
    keymap.bind("C-c x", "first")

    keymap.unbind("C-c x")
    keymap.unbind("C-c y")

    assert keymap.lookup("C-c x") is None


def test_as_dict_is_sorted_by_key():
    keymap = Keymap()
    keymap.bind("C-c w", "whitespace-cleanup")
    keymap.bind("C-c f", "fci-mode")

    assert list(keymap.as_dict()) == ["C-c f", "C-c w"]


def test_render_lists_bindings():
    keymap = Keymap("global")
    assert keymap.render() == "<p>No key bindings.</p>"

    keymap.bind("C-c t", "browse-ticket")
    html = keymap.render()

    assert "global key bindings" in html
    assert "<kbd>C-c t</kbd>" in html
    assert "browse-ticket" in html
