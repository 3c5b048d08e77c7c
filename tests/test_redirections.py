import pytest

from shellkit.heredoc import heredoc_path
from shellkit.redirections import (
    RedirectionError,
    count_redirections,
    open_input_files,
    open_output_files,
    strip_redirections,
)


def _unquote(text):
    return text.strip("\"'")


def _read_all(files):
    try:
        return [stream.read() for stream in files]
    finally:
        for stream in files:
            stream.close()


def test_count_redirections_counts_tokens_by_first_char():
    tokens = ["cat", "<", "a", "<<", "EOF", ">", "out"]
    assert count_redirections("<", tokens) == 2
    assert count_redirections(">", tokens) == 1
    assert count_redirections("|", tokens) == 0


def test_count_redirections_rejects_long_marker():
    with pytest.raises(ValueError):
        count_redirections("<<", ["a"])


def test_strip_redirections_removes_operator_and_target():
    tokens = ["cat", "<", "a", "-n", "<<", "EOF", ">", "out"]
    assert strip_redirections(tokens, "<") == ["cat", "-n", ">", "out"]
    assert strip_redirections(tokens, ">") == ["cat", "<", "a", "-n", "<<", "EOF"]


def test_strip_redirections_length_invariant():
    tokens = ["echo", "<", "x", "hi", "<", "y"]
    stripped = strip_redirections(tokens, "<")
    assert len(stripped) == len(tokens) - 2 * count_redirections("<", tokens)
    assert stripped == ["echo", "hi"]


def test_strip_redirections_only_redirection_leaves_nothing():
    assert strip_redirections(["<", "file"], "<") == []


def test_open_input_files_without_redirections():
    assert open_input_files(["ls", "-l"]) == []
    assert open_output_files(["ls", "-l"]) == []


def test_open_input_files_reads_in_order(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.write_bytes(b"first")
    second.write_bytes(b"second")
    tokens = ["cat", "<", str(first), "<", str(second)]
    assert _read_all(open_input_files(tokens, tmp_path)) == [b"first", b"second"]


def test_open_input_files_unquotes_target(tmp_path):
    target = tmp_path / "data"
    target.write_bytes(b"abc")
    tokens = ["cat", "<", f'"{target}"']
    assert _read_all(open_input_files(tokens, tmp_path, _unquote)) == [b"abc"]


def test_open_input_files_uses_heredoc_files(tmp_path):
    heredoc_path(0, tmp_path).write_bytes(b"doc zero\n")
    heredoc_path(1, tmp_path).write_bytes(b"doc one\n")
    tokens = ["cat", "<<", "EOF", "<<", "END"]
    assert _read_all(open_input_files(tokens, tmp_path)) == [b"doc zero\n", b"doc one\n"]


def test_open_input_files_missing_heredoc_raises(tmp_path):
    with pytest.raises(RedirectionError):
        open_input_files(["cat", "<<", "EOF"], tmp_path)


def test_open_input_files_read_write_creates_missing(tmp_path):
    target = tmp_path / "fresh"
    files = open_input_files(["cat", "<>", str(target)], tmp_path)
    assert _read_all(files) == [b""]
    assert target.exists()


def test_open_input_files_missing_file_raises(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(RedirectionError) as info:
        open_input_files(["cat", "<", str(missing)], tmp_path)
    assert "No such file or directory" in str(info.value)
    assert info.value.exit_code == 1


def test_open_input_files_missing_target_raises(tmp_path):
    with pytest.raises(RedirectionError):
        open_input_files(["cat", "<"], tmp_path)


def test_open_output_files_truncates_and_appends(tmp_path):
    truncated = tmp_path / "t"
    appended = tmp_path / "a"
    truncated.write_bytes(b"old")
    appended.write_bytes(b"old")
    files = open_output_files(["echo", ">", str(truncated), ">>", str(appended)])
    try:
        for stream in files:
            stream.write(b"new")
    finally:
        for stream in files:
            stream.close()
    assert truncated.read_bytes() == b"new"
    assert appended.read_bytes() == b"oldnew"


def test_open_output_files_creates_missing(tmp_path):
    target = tmp_path / "created"
    files = open_output_files(["echo", ">", f"'{target}'"], _unquote)
    for stream in files:
        stream.close()
    assert len(files) == 1
    assert target.exists()


def test_open_output_files_append_keeps_token_as_is(tmp_path):
    target = tmp_path / "plain"
    with pytest.raises(RedirectionError):
        open_output_files(["echo", ">>", f"'{tmp_path / 'missing_dir' / 'x'}'"], _unquote)
    files = open_output_files(["echo", ">>", str(target)], _unquote)
    for stream in files:
        stream.close()
    assert target.exists()


def test_open_output_files_error_message(tmp_path):
    bad = tmp_path / "no_such_dir" / "file"
    with pytest.raises(RedirectionError) as info:
        open_output_files(["echo", ">", str(bad)])
    assert str(info.value) == f"shell: {bad}: error"
    assert info.value.exit_code == 1