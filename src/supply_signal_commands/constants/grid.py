"""Map grid geometry."""

from __future__ import annotations

DEFAULT_WORLD_SIZE: float = 4000.0
GRID_CELLS_PER_KM: float = 7.0
GRID_REFERENCE_SIZE: float = 1024.0
ALPHABET_SIZE: int = 26
