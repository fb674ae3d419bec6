import pytest

from typeshift.letters import LetterCounts, LetterSet, index_letter, letter_index


def test_letter_index_round_trip_bounds():
    assert letter_index("a") == 0
    assert letter_index("z") == 25
    assert index_letter(letter_index("q")) == "q"


@pytest.mark.parametrize("ch", ["A", "{", "`", "1", "é"])
def test_letter_index_rejects_non_lowercase(ch):
    with pytest.raises(ValueError):
        letter_index(ch)


def test_letter_set_membership():
    letters = LetterSet("dpivee")
    assert len(letters) == 5
    assert letters.contains("d")
    assert not letters.contains("a")
    assert "v" in letters
    assert "x" not in letters
    assert "D" not in letters
    assert list(letters) == ["d", "e", "i", "p", "v"]
    assert str(letters) == "deipv"


def test_letter_set_add():
    letters = LetterSet()
    assert len(letters) == 0
    letters.add("k")
    letters.add("k")
    assert list(letters) == ["k"]
    assert letters.has_index(letter_index("k"))
    assert letters == LetterSet("k")


def test_filter_counts_only_yields_members():
    counts = LetterCounts()
    for ch in "abbbz":
        counts.increment(ch)
    letters = LetterSet("bcz")
    # alphabetical order: b, c, z
    assert list(letters.filter_counts(counts)) == [3, 0, 1]


def test_letter_counts():
    counts = LetterCounts()
    assert counts.total() == 0
    counts.increment("e")
    counts.increment("e")
    counts.increment("s", 3)
    assert counts.count("e") == 2
    assert counts["s"] == 3
    assert counts.get_raw(letter_index("e")) == 2
    assert counts.as_dict() == {"e": 2, "s": 3}
    assert counts.total() == 5


def test_letter_counts_copy_is_independent():
    counts = LetterCounts()
    counts.increment("a")
    clone = counts.copy()
    clone.increment("a")
    assert counts["a"] == 1
    assert clone["a"] == 2
    assert counts != clone


def test_letter_counts_from_sequence():
    counts = LetterCounts(range(26))
    assert counts["a"] == 0
    assert counts["z"] == 25
    with pytest.raises(ValueError):
        LetterCounts([1, 2, 3])
