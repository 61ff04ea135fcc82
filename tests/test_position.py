import dataclasses

import pytest

from yorutris.position import Position


def test_shifted_returns_new_position():
    p = Position(2, 3)
    q = p.shifted(1, -2)
    assert q == Position(3, 1)
    assert p == Position(2, 3)


def test_shifted_by_zero_is_equal():
    p = Position(4, 7)
    assert p.shifted(0, 0) == p


def test_shift_round_trip():
    p = Position(5, 9)
    assert p.shifted(3, 4).shifted(-3, -4) == p


def test_positions_are_hashable_and_comparable():
    cells = {Position(0, 1), Position(0, 1), Position(1, 0)}
    assert len(cells) == 2
    assert sorted(cells) == [Position(0, 1), Position(1, 0)]


def test_position_is_immutable():
    p = Position(0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.row = 3
    assert p.row == 0
    assert p.shifted(1, 1) == Position(1, 1)