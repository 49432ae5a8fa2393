import pytest

from ossim.file_tools import (
    copy_file,
    copy_main,
    count_word,
    grep_lines,
    grep_main,
    list_directory,
    main,
    pipe_main,
    run_copy_and_grep,
    uppercase_via_child,
)

TEXT = "apple pie\nbanana split\npineapple apple\ncherry\n"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(TEXT)
    return path


def test_copy_round_trip(sample, tmp_path):
    dest = tmp_path / "copy.txt"
    result = copy_file(sample, dest)
    assert result == dest
    assert dest.read_bytes() == sample.read_bytes()


def test_copy_binary_content(tmp_path):
    src = tmp_path / "bin"
    data = bytes(range(256)) * 4
    src.write_bytes(data)
    dest = tmp_path / "bin.copy"
    copy_file(src, dest)
    assert dest.read_bytes() == data


def test_copy_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing", tmp_path / "out")


def test_grep_lines_substring(sample):
    lines = grep_lines(sample, "apple")
    assert lines == ["apple pie", "pineapple apple"]
    assert grep_lines(sample, "kiwi") == []


def test_count_word_exact_tokens(sample):
    assert count_word(sample, "apple") == 2
    assert count_word(sample, "pineapple") == 1
    assert count_word(sample, "app") == 0


def test_list_directory(tmp_path):
    for name in ["b.txt", "a.txt", ".hidden"]:
        (tmp_path / name).write_text("")
    (tmp_path / "sub").mkdir()
    assert list_directory(tmp_path) == ["a.txt", "b.txt", "sub"]


def test_list_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(tmp_path / "nope")


def test_uppercase_via_child():
    assert uppercase_via_child("hello world") == "HELLO WORLD"


def test_run_copy_and_grep(sample, tmp_path):
    dest = tmp_path / "out.txt"
    codes = run_copy_and_grep(str(sample), str(dest), str(sample), "apple")
    assert codes == (0, 0)
    assert dest.read_text() == TEXT


def test_run_copy_and_grep_reports_failure(sample, tmp_path):
    copy_code, grep_code = run_copy_and_grep(
        str(tmp_path / "missing"), str(tmp_path / "out"), str(sample), "apple"
    )
    assert copy_code == 1
    assert grep_code == 0


def test_copy_main(sample, tmp_path):
    dest = tmp_path / "main.txt"
    assert copy_main([str(sample), str(dest)]) == 0
    assert dest.read_text() == TEXT
    assert copy_main([str(tmp_path / "missing"), str(dest)]) == 1


def test_copy_main_requires_two_arguments(sample):
    with pytest.raises(SystemExit):
        copy_main([str(sample)])


def test_grep_main_prints_found_per_line(sample, capsys):
    assert grep_main([str(sample), "apple"]) == 0
    assert capsys.readouterr().out.split() == ["found", "found"]


def test_pipe_main(capsys):
    assert pipe_main(["shout"]) == 0
    assert "Parent received from child: SHOUT" in capsys.readouterr().out


def test_main_count(sample, capsys):
    assert main(["count", str(sample), "apple"]) == 0
    assert "The word 'apple' appeared 2 times in the file." in capsys.readouterr().out


def test_main_count_not_found(sample, capsys):
    assert main(["count", str(sample), "kiwi"]) == 0
    assert "Word not found in the file." in capsys.readouterr().out


def test_main_run(sample, tmp_path, capsys):
    dest = tmp_path / "run.txt"
    assert main(["run", str(sample), str(dest), str(sample), "cherry"]) == 0
    assert dest.read_text() == TEXT
    assert "Both processes executed successfully." in capsys.readouterr().out