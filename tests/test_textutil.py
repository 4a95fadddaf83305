import io
import sys

import pytest

from pslister.textutil import (
    FileError,
    copy_stream,
    count_char,
    dump_file,
    is_strlower,
    open_file,
    open_pipe,
    replace_pairs,
    replace_substrings,
    substring,
    unlink_quietly,
)


def test_is_strlower():
    assert is_strlower("abc def 123")
    assert not is_strlower("abC")
    assert is_strlower("")


def test_count_char():
    assert count_char("banana", "a") == 3
    assert count_char("banana", "z") == 0


def test_substring():
    assert substring("hello world", 6, 5) == "world"
    assert substring("abc", 1, 10) == "bc"


def test_replace_substrings_worked_example():
    subst = [("1", "11"), ("3", "333"), ("4", "")]
    assert replace_substrings("1234", subst) == "112333"


def test_replace_pairs_worked_example():
    assert replace_pairs("1234", "1", "11", "3", "333", "4", "") == "112333"


def test_replace_first_pattern_wins_and_no_rescan():
    assert replace_substrings("aaa", [("a", "aa"), ("aa", "x")]) == "aaaaaa"


def test_replace_pairs_odd_arguments():
    with pytest.raises(ValueError):
        replace_pairs("abc", "a")


def test_replace_empty_pattern_rejected():
    with pytest.raises(ValueError):
        replace_substrings("abc", [("", "x")])


def test_copy_stream_round_trip():
    data = b"some bytes\n" * 5000
    target = io.BytesIO()
    copy_stream(io.BytesIO(data), target)
    assert target.getvalue() == data


def test_dump_file_text_and_binary(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("line one\nline two\n")
    text_out = io.StringIO()
    dump_file(text_out, path)
    assert text_out.getvalue() == "line one\nline two\n"
    bin_out = io.BytesIO()
    dump_file(bin_out, path)
    assert bin_out.getvalue() == path.read_bytes()


def test_open_file_missing_raises(tmp_path):
    with pytest.raises(FileError, match="cannot open file"):
        open_file(tmp_path / "missing", "r")


def test_open_file_create_failure(tmp_path):
    with pytest.raises(FileError, match="cannot create file"):
        open_file(tmp_path / "no" / "dir" / "f", "w")


def test_unlink_quietly(tmp_path):
    path = tmp_path / "gone"
    path.write_text("x")
    unlink_quietly(path)
    unlink_quietly(path)
    assert not path.exists()


def test_open_pipe_read():
    command = f'"{sys.executable}" -c "print(42)"'
    with open_pipe(command, "r") as pipe:
        out = pipe.read()
    assert out.strip() == "42"


def test_open_pipe_write_and_status(tmp_path):
    target = tmp_path / "out.txt"
    script = (
        "import sys; open(sys.argv[1], 'w').write(sys.stdin.read())"
    )
    command = f'"{sys.executable}" -c "{script}" "{target}"'
    pipe = open_pipe(command, "w")
    pipe.write("through the pipe")
    status = pipe.close()
    assert status == 0
    assert target.read_text() == "through the pipe"