"""Map grid labels for world positions.

Square maps are split into cells of ``1024 / 7`` metres. Columns are
lettered from the west edge (A..Z, AA, AB, ...) and rows numbered from 0
at the north edge. Positions off the map clamp to the nearest edge cell.
"""

from __future__ import annotations

import math

from supply_signal_commands.constants.grid import (
    ALPHABET_SIZE,
    DEFAULT_WORLD_SIZE,
    GRID_CELLS_PER_KM,
    GRID_REFERENCE_SIZE,
)
from supply_signal_commands.types.host import Position


def column_letters(index: int) -> str:
    """Spreadsheet-style column name for a zero-based index."""
    if index < 0:
        raise ValueError(f"column index must be non-negative, got {index}")
    letters = ""
    number = index + 1
    while number:
        number, remainder = divmod(number - 1, ALPHABET_SIZE)
        letters = chr(ord("A") + remainder) + letters
    return letters


class MapGrid:
    def __init__(self, world_size: float = DEFAULT_WORLD_SIZE) -> None:
        if world_size <= 0:
            raise ValueError(f"world size must be positive, got {world_size}")
        self.world_size = world_size
        self.cell_count = world_size / GRID_REFERENCE_SIZE * GRID_CELLS_PER_KM
        self.cell_size = world_size / self.cell_count

    def label(self, position: Position) -> str:
        half = self.world_size / 2
        column = math.floor((position.x + half) / self.cell_size)
        row = math.floor(self.cell_count - (position.z + half) / self.cell_size)
        last = math.ceil(self.cell_count) - 1
        return f"{column_letters(min(max(column, 0), last))}{min(max(row, 0), last)}"
