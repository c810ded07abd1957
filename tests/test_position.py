import dataclasses

import pytest

from hexlayers.position import Cell, Position


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        (Position(0, 0), "Pos(q:0, r:0)"),
        (Position(1, 2), "Pos(q:1, r:2)"),
        (Position(-1, -2), "Pos(q:-1, r:-2)"),
        (Position(5, -3), "Pos(q:5, r:-3)"),
    ],
)
def test_position_str(pos, expected):
    assert str(pos) == expected


@pytest.mark.parametrize(("q", "r"), [(0, 0), (1, 2), (-1, -2), (5, -3)])
def test_position_fields(q, r):
    pos = Position(q, r)
    assert (pos.q, pos.r) == (q, r)


def test_position_default_is_origin():
    assert Position() == Position(0, 0)


def test_position_is_immutable():
    pos = Position(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.q = 5  # type: ignore[misc]
    assert pos == Position(1, 2)


@pytest.mark.parametrize(
    ("q", "r", "expected"),
    [(0, 0, Position(0, 0)), (1, 2, Position(1, 2)), (-1, -2, Position(-1, -2))],
)
def test_cell_position(q, r, expected):
    assert Cell(q, r).position == expected


def test_cell_equality_follows_position():
    assert Cell(1, 2) == Cell(1, 2)
    assert Cell(1, 2) != Cell(2, 1)
    assert len({Cell(0, 0), Cell(0, 0), Cell(1, 0)}) == 2