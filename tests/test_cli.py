import io
from contextlib import redirect_stdout

import pytest

from typeshift import main
from typeshift.solver import solver


@pytest.fixture
def word_list(tmp_path, sample_words):
    path = tmp_path / "wordlist.txt"
    path.write_text("".join(f'"{word}"\n' for word in sample_words), encoding="utf-8")
    return path


@pytest.fixture
def puzzle_file(tmp_path, sample_text):
    path = tmp_path / "2023-11-16.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


def test_run_prints_report(puzzle_file, dictionary, capsys):
    result = solver.run(puzzle_file, dictionary)
    out = capsys.readouterr().out
    assert "Possible words: 8" in out
    assert "column 3: deipv" in out
    assert "First solution: above, basic, study, wheel, whups" in out
    assert f"5 words, {result.steps} steps" in out


def test_run_prints_to_current_stdout(puzzle_file, dictionary):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        solver.run(puzzle_file, dictionary)
    assert "First solution: above, basic, study, wheel, whups" in buffer.getvalue()


def test_main_find_all(word_list, puzzle_file, capsys):
    main(["--dict", str(word_list), "--all", str(puzzle_file)])
    out = capsys.readouterr().out
    assert "First solution: above, basic, study, wheel, whups" in out
    assert "Minimal solutions: 1" in out
    assert "Best solution: above, basic, study, wheel, whups" in out


def test_main_reports_unsolvable_puzzle(word_list, tmp_path, capsys):
    path = tmp_path / "unsolvable.txt"
    path.write_text("wsabz\nhbta\noesu\ndpive\nlceys\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--dict", str(word_list), str(path)])
    assert exc_info.value.code == 1
    assert "'z' in column 0" in capsys.readouterr().err


@pytest.mark.parametrize("contents", ["", "ab\nC\n"])
def test_main_reports_invalid_puzzle(word_list, tmp_path, contents):
    path = tmp_path / "bad.txt"
    path.write_text(contents, encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--dict", str(word_list), str(path)])
    assert exc_info.value.code == 1


def test_main_reports_missing_files(word_list, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--dict", str(word_list), str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1

    with pytest.raises(SystemExit):
        main(["--dict", str(tmp_path / "missing-words.txt"), str(tmp_path / "missing.txt")])
    assert "not found" in capsys.readouterr().err
