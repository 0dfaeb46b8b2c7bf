"""Tests for map grid labels."""

from __future__ import annotations

import pytest

from supply_signal_commands.engine import MapGrid, column_letters
from supply_signal_commands.types import Position


@pytest.mark.parametrize(
    ("index", "expected"),
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_column_letters(index: int, expected: str) -> None:
    assert column_letters(index) == expected


def test_column_letters_rejects_negative_index() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        column_letters(-1)


def test_map_centre_label() -> None:
    grid = MapGrid(4000)

    assert grid.label(Position(0.0, 0.0, 0.0)) == "N13"


def test_north_west_corner_is_a0() -> None:
    grid = MapGrid(4000)

    assert grid.label(Position(-1990.0, 30.0, 1990.0)) == "A0"


def test_positions_outside_the_map_clamp_to_first_cell() -> None:
    grid = MapGrid(4000)

    assert grid.label(Position(-2500.0, 0.0, 2500.0)) == "A0"


def test_positions_outside_the_map_clamp_to_last_cell() -> None:
    grid = MapGrid(4000)

    assert grid.label(Position(1990.0, 0.0, -1990.0)) == "AB27"
    assert grid.label(Position(5000.0, 0.0, -5000.0)) == "AB27"
    assert grid.label(Position(5000.0, 0.0, 0.0)) == "AB13"


def test_height_does_not_change_label() -> None:
    grid = MapGrid(3000)

    assert grid.label(Position(100.0, 0.0, -200.0)) == grid.label(Position(100.0, 250.0, -200.0))


def test_world_size_must_be_positive() -> None:
    with pytest.raises(ValueError, match="positive"):
        MapGrid(0)
