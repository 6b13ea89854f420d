"""Tests for the shared grid store."""

from __future__ import annotations

import threading

import pytest

from bigletters.domain.models import CELL_COUNT, DARKEN_STEP, MAX_BRIGHTNESS
from bigletters.grid.store import GridStore


class TestGridStoreInit:
    def test_fresh_grid_is_all_bright(self, store: GridStore) -> None:
        cells = store.snapshot().cells
        assert len(cells) == CELL_COUNT == 256
        assert all(v == MAX_BRIGHTNESS for v in cells)

    def test_size_and_len(self, store: GridStore) -> None:
        assert store.size == 16
        assert len(store) == 256

    def test_custom_size(self) -> None:
        assert len(GridStore(size=4)) == 16

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            GridStore(size=0)


class TestDarken:
    def test_single_darken(self, store: GridStore) -> None:
        store.darken(0)
        assert store.cell(0) == 223

    def test_other_cells_untouched(self, store: GridStore) -> None:
        store.darken(10)
        cells = store.snapshot().cells
        assert cells[10] == 255 - DARKEN_STEP
        assert cells[:10] == [255] * 10
        assert cells[11:] == [255] * 245

    @pytest.mark.parametrize("times", [1, 2, 3, 7, 8, 9, 20])
    def test_saturates_at_zero(self, store: GridStore, times: int) -> None:
        for _ in range(times):
            store.darken(5)
        assert store.cell(5) == max(0, 255 - DARKEN_STEP * times)

    def test_eighth_darken_clamps_instead_of_wrapping(self, store: GridStore) -> None:
        for _ in range(7):
            store.darken(5)
        assert store.cell(5) == 31
        store.darken(5)
        assert store.cell(5) == 0

    @pytest.mark.parametrize("idx", [256, 257, 9999, -1])
    def test_out_of_range_is_ignored(self, store: GridStore, idx: int) -> None:
        before = store.snapshot()
        assert store.darken(idx) is None
        assert store.snapshot() == before

    def test_last_cell(self, store: GridStore) -> None:
        store.darken(255)
        assert store.cell(255) == 223


class TestSnapshot:
    def test_snapshot_is_a_copy(self, store: GridStore) -> None:
        snap = store.snapshot()
        store.darken(0)
        assert snap.cells[0] == 255
        assert store.snapshot().cells[0] == 223

    def test_cell_out_of_range_raises(self, store: GridStore) -> None:
        with pytest.raises(IndexError):
            store.cell(256)


class TestConcurrency:
    def test_no_lost_updates_on_same_cell(self, store: GridStore) -> None:
        # 4 threads x 2 darkens = 8 steps, exactly enough to reach zero from 255
        threads = [
            threading.Thread(target=lambda: [store.darken(3) for _ in range(2)])
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert store.cell(3) == 0

    def test_snapshots_see_consistent_prefixes(self, store: GridStore) -> None:
        snapshots = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                snapshots.append(store.snapshot().cells)

        def writer(indices: range) -> None:
            for idx in indices:
                store.darken(idx)

        readers = [threading.Thread(target=reader) for _ in range(2)]
        writers = [threading.Thread(target=writer, args=(range(i, 256, 4),)) for i in range(4)]
        for t in readers + writers:
            t.start()
        for t in writers:
            t.join()
        stop.set()
        for t in readers:
            t.join()

        final = store.snapshot().cells
        assert final == [223] * 256
        for cells in snapshots:
            assert len(cells) == 256
            assert set(cells) <= {255, 223}
            # Within one writer, cells are darkened in order, so each
            # writer's darkened cells form a prefix of its index range.
            for start in range(4):
                seen = [cells[idx] == 223 for idx in range(start, 256, 4)]
                assert seen == sorted(seen, reverse=True)
