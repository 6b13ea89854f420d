"""Thread-safe store for the shared brightness grid.

The store is created once per application and handed to the HTTP layer
explicitly. Every read and write goes through a single lock, so a
snapshot never sees a half-applied darken and two darkens on the same
cell never lose an update.
"""

from __future__ import annotations

import logging
import threading

import numpy as np

from bigletters.domain.models import DARKEN_STEP, GRID_SIZE, MAX_BRIGHTNESS, Grid

logger = logging.getLogger(__name__)


class GridStore:
    """A fixed ``size`` x ``size`` grid of 8-bit brightness values.

    All cells start at full brightness and can only be darkened, one
    cell at a time, by ``step``. Values saturate at zero.

    Example usage::

        store = GridStore()
        store.darken(0)
        store.snapshot().cells[0]  # 223
    """

    def __init__(self, size: int = GRID_SIZE, step: int = DARKEN_STEP) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self._size = size
        self._step = step
        self._cells = np.full(size * size, MAX_BRIGHTNESS, dtype=np.uint8)
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        """Number of cells along one side."""
        return self._size

    def __len__(self) -> int:
        return self._cells.size

    def snapshot(self) -> Grid:
        """Return a consistent copy of every cell."""
        with self._lock:
            values = self._cells.tolist()
        return Grid(cells=values)

    def cell(self, idx: int) -> int:
        """Return the brightness of one cell.

        Raises:
            IndexError: If ``idx`` is outside the grid.
        """
        if not 0 <= idx < len(self):
            raise IndexError(f"Cell index {idx} out of range 0..{len(self) - 1}")
        with self._lock:
            return int(self._cells[idx])

    def darken(self, idx: int) -> None:
        """Darken one cell by the configured step, clamping at zero.

        Indexes outside the grid are ignored without error.
        """
        if not 0 <= idx < len(self):
            logger.debug("Ignoring darken of out-of-range cell %d", idx)
            return
        with self._lock:
            # uint8 arithmetic wraps, so clamp in Python ints
            current = int(self._cells[idx])
            updated = max(0, current - self._step)
            self._cells[idx] = updated
        logger.debug("Darkened cell %d: %d -> %d", idx, current, updated)
