"""Shared brightness grid.

Public API:
    GridStore -- lock-guarded grid of brightness cells
"""

from bigletters.grid.store import GridStore

__all__ = ["GridStore"]
