"""Domain models shared by the server, the client and the CLI."""

from bigletters.domain.models import (
    CELL_COUNT,
    DARKEN_STEP,
    GRID_SIZE,
    MAX_BRIGHTNESS,
    CellUpdate,
    Grid,
)

__all__ = [
    "CELL_COUNT",
    "DARKEN_STEP",
    "GRID_SIZE",
    "MAX_BRIGHTNESS",
    "CellUpdate",
    "Grid",
]
