"""Unit tests for mdlinks.api.ref.LineIndex."""

import pytest

from mdlinks.api.ref.LineIndex import LineIndex

pytestmark = pytest.mark.ref

# "ab" CRLF "cd" CR "e" LF "f"
MIXED = "ab\r\ncd\re\nf"


def test_line_count():
    assert LineIndex(MIXED).line_count == 4
    assert LineIndex("").line_count == 1
    assert LineIndex("one\n").line_count == 2


@pytest.mark.parametrize(
    ("offset", "position"),
    [(0, (0, 0)), (2, (0, 2)), (4, (1, 0)), (5, (1, 1)), (7, (2, 0)), (8, (2, 1)), (9, (3, 0)), (10, (3, 1))],
)
def test_position_at(offset, position):
    assert LineIndex(MIXED).position_at(offset) == position


def test_position_at_clamps():
    index = LineIndex(MIXED)
    assert index.position_at(-5) == (0, 0)
    assert index.position_at(99) == (3, 1)


@pytest.mark.parametrize(
    ("line", "column", "offset"),
    [(0, 0, 0), (0, 1, 1), (1, 1, 5), (2, 0, 7), (3, 1, 10)],
)
def test_offset_at(line, column, offset):
    assert LineIndex(MIXED).offset_at(line, column) == offset


def test_offset_at_clamps():
    index = LineIndex(MIXED)
    assert index.offset_at(0, 99) == 2
    assert index.offset_at(1, -3) == 4
    assert index.offset_at(-1, 3) == 0
    assert index.offset_at(9, 0) == 10
    assert LineIndex("").offset_at(0, 5) == 0
