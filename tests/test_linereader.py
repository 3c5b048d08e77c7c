import os

import pytest

from shellkit.linereader import LineReader


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_reads_lines_in_order(size):
    fd = _pipe_with(b"first\nsecond\nthird")
    reader = LineReader(size)
    try:
        assert reader.read_line(fd) == "first\n"
        assert reader.read_line(fd) == "second\n"
        assert reader.read_line(fd) == "third"
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 5, 100])
def test_lines_join_back_to_input(size):
    data = "alpha\n\nbeta\ngamma delta\n"
    fd = _pipe_with(data.encode())
    reader = LineReader(size)
    lines = []
    try:
        while (line := reader.read_line(fd)) is not None:
            lines.append(line)
    finally:
        os.close(fd)
    assert "".join(lines) == data
    assert lines[1] == "\n"


def test_empty_input_gives_none():
    fd = _pipe_with(b"")
    try:
        assert LineReader(4).read_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_are_kept_apart():
    fd_a = _pipe_with(b"a1\na2\n")
    fd_b = _pipe_with(b"b1\nb2\n")
    reader = LineReader(64)
    try:
        assert reader.read_line(fd_a) == "a1\n"
        assert reader.read_line(fd_b) == "b1\n"
        assert reader.read_line(fd_a) == "a2\n"
        assert reader.read_line(fd_b) == "b2\n"
    finally:
        os.close(fd_a)
        os.close(fd_b)


def test_discard_drops_kept_data():
    fd = _pipe_with(b"one\ntwo\n")
    reader = LineReader(64)
    try:
        assert reader.read_line(fd) == "one\n"
        reader.discard(fd)
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


def test_reads_regular_file(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("x\ny\n")
    fd = os.open(path, os.O_RDONLY)
    reader = LineReader(3)
    try:
        assert [reader.read_line(fd), reader.read_line(fd), reader.read_line(fd)] == [
            "x\n",
            "y\n",
            None,
        ]
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader().read_line(-1)


def test_closed_descriptor_raises():
    read_end, write_end = os.pipe()
    os.close(write_end)
    os.close(read_end)
    with pytest.raises(OSError):
        LineReader().read_line(read_end)