import pytest

from typeshift.errors import InvalidPuzzleInput
from typeshift.letters import LetterSet
from typeshift.puzzle import Puzzle, load_puzzle, parse_columns
from typeshift.wordlist import Dictionary, count_letters


def test_parse_columns(sample_text):
    columns = parse_columns(sample_text)
    assert [str(column) for column in columns] == ["absw", "abht", "eosu", "deipv", "celsy"]


def test_parse_columns_ignores_blank_lines_and_duplicates():
    columns = parse_columns("\n  ab \n\nbba\n\n")
    assert columns == [LetterSet("ab"), LetterSet("ab")]


@pytest.mark.parametrize("text", ["", "\n\n", "   \n"])
def test_parse_columns_requires_a_column(text):
    with pytest.raises(InvalidPuzzleInput):
        parse_columns(text)


@pytest.mark.parametrize("text", ["ab\nCd\n", "ab\nc d\n", "a1\n", "ab,c\n"])
def test_parse_columns_rejects_non_letters(text):
    with pytest.raises(InvalidPuzzleInput, match="invalid characters"):
        parse_columns(text)


def test_invalid_puzzle_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_columns("?")


def test_puzzle_filters_spellable_words(sample_puzzle):
    assert sample_puzzle.width == 5
    assert sample_puzzle.words == (
        "above",
        "basic",
        "sheds",
        "shoes",
        "studs",
        "study",
        "wheel",
        "whups",
    )
    assert sample_puzzle.size() == 8
    for word in sample_puzzle.words:
        assert len(word) == sample_puzzle.width
        assert all(ch in column for ch, column in zip(word, sample_puzzle.columns))


def test_puzzle_rarity_counts_candidate_letters(sample_puzzle):
    rarity = sample_puzzle.rarity
    assert rarity["s"] == 9
    assert rarity["h"] == 4
    assert rarity["v"] == 1
    # letters only found in non-candidate words are not counted
    assert rarity["z"] == 0
    assert rarity.total() == 5 * sample_puzzle.size()
    assert sample_puzzle.word_rarity == (1, 1, 3, 2, 2, 1, 1, 1)


def test_puzzle_rarity_uses_precomputed_counts():
    doubled = count_letters("cat") * 2
    puzzle = Puzzle.from_text("c\na\nt\n", Dictionary([("cat", doubled)]))
    assert puzzle.rarity["c"] == 2
    assert puzzle.rarity.total() == 6


def test_min_solution_size(sample_puzzle):
    assert sample_puzzle.min_solution_size() == 5


def test_uncovered_letters(sample_puzzle):
    assert sample_puzzle.uncovered_letters() == []

    puzzle = Puzzle.from_text("abc\ntu\n", Dictionary(["at", "bu", "au"]))
    assert puzzle.uncovered_letters() == [(0, "c")]


def test_empty_dictionary_leaves_no_candidates(sample_text):
    puzzle = Puzzle.from_text(sample_text, Dictionary())
    assert puzzle.size() == 0
    assert puzzle.rarity.total() == 0
    assert len(puzzle.uncovered_letters()) == 22


def test_puzzle_rejects_empty_columns():
    with pytest.raises(InvalidPuzzleInput):
        Puzzle([], Dictionary())
    with pytest.raises(InvalidPuzzleInput):
        Puzzle([LetterSet("a"), LetterSet()], Dictionary())


def test_load_puzzle(tmp_path, dictionary, sample_text):
    path = tmp_path / "2023-11-16.txt"
    path.write_text(sample_text, encoding="utf-8")
    puzzle = load_puzzle(path, dictionary)
    assert puzzle.size() == 8
    assert repr(puzzle) == "Puzzle(columns='absw abht eosu deipv celsy', size=8)"
