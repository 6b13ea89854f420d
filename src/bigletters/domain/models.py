"""Core domain models for bigletters.

These are the payloads exchanged over the grid API: the full grid of
brightness values returned by ``GET /api/grid`` and the single-cell
update accepted by ``POST /api/cell``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Grid geometry
# ---------------------------------------------------------------------------

GRID_SIZE = 16
CELL_COUNT = GRID_SIZE * GRID_SIZE
MAX_BRIGHTNESS = 255
DARKEN_STEP = 32

Brightness = Annotated[int, Field(ge=0, le=MAX_BRIGHTNESS)]


# ---------------------------------------------------------------------------
# API payloads
# ---------------------------------------------------------------------------


class Grid(BaseModel):
    """A point-in-time copy of every cell, in row-major order.

    Each value is a brightness from 0 (black) to 255 (white).
    """

    model_config = ConfigDict(frozen=True)

    cells: list[Brightness] = Field(description="Row-major brightness values")

    def row(self, y: int, width: int = GRID_SIZE) -> list[int]:
        """Return the cells of row ``y`` for a grid ``width`` cells wide."""
        return self.cells[y * width:(y + 1) * width]


class CellUpdate(BaseModel):
    """Request body for darkening one cell."""

    idx: int = Field(ge=0, strict=True, description="Row-major index of the cell to darken")
