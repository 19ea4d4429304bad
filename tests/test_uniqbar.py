"""Tests for mesh_util/uniqbar.py and mesh_util/baridx.py: bar extraction."""

import numpy as np
import numpy.testing as npt
import pytest

from pydistmesh.mesh_util.baridx import baridx
from pydistmesh.mesh_util.uniqbar import uniqbar


SQUARE = np.array([[0, 1, 2], [0, 2, 3]])
SQUARE_BARS = np.array([[0, 1], [0, 2], [0, 3], [1, 2], [2, 3]])


class TestUniqbar:
    def test_single_triangle(self):
        npt.assert_array_equal(uniqbar(np.array([[2, 0, 1]])),
                               [[0, 1], [0, 2], [1, 2]])

    def test_shared_edge_once(self):
        npt.assert_array_equal(uniqbar(SQUARE), SQUARE_BARS)

    def test_smaller_index_first(self):
        bars = uniqbar(np.array([[5, 3, 9], [9, 3, 1]]))
        assert np.all(bars[:, 0] < bars[:, 1])

    def test_lexicographic_order(self):
        bars = uniqbar(np.array([[5, 3, 9], [9, 3, 1], [0, 7, 2]]))
        keys = bars[:, 0] * 100 + bars[:, 1]
        assert np.all(np.diff(keys) > 0)

    def test_row_order_independent(self):
        tria = np.random.default_rng(1).integers(0, 30, size=(40, 3))
        perm = np.random.default_rng(2).permutation(40)
        npt.assert_array_equal(uniqbar(tria), uniqbar(tria[perm, :]))

    def test_vertex_order_independent(self):
        tria = np.array([[0, 1, 2], [1, 3, 2], [2, 3, 4]])
        npt.assert_array_equal(uniqbar(tria), uniqbar(tria[:, [2, 0, 1]]))
        npt.assert_array_equal(uniqbar(tria), uniqbar(tria[:, ::-1]))

    def test_idempotent(self):
        tria = np.array([[0, 1, 2], [1, 3, 2]])
        npt.assert_array_equal(uniqbar(tria), uniqbar(tria))

    def test_tetrahedron_cycle(self):
        npt.assert_array_equal(uniqbar(np.array([[0, 1, 2, 3]])),
                               [[0, 1], [0, 3], [1, 2], [2, 3]])

    def test_tetrahedra_row_order_independent(self):
        tria = np.array([[0, 1, 2, 3], [1, 2, 3, 4], [0, 2, 4, 5]])
        npt.assert_array_equal(uniqbar(tria), uniqbar(tria[::-1, :]))

    def test_empty(self):
        assert uniqbar(np.empty((0, 3), dtype=int)).shape == (0, 2)

    def test_list_input(self):
        npt.assert_array_equal(uniqbar([[0, 1, 2]]), [[0, 1], [0, 2], [1, 2]])


class TestBaridx:
    def test_square(self):
        npt.assert_array_equal(baridx(SQUARE, SQUARE_BARS), [[0, 3, 1], [1, 4, 2]])

    def test_reversed_bars_match(self):
        npt.assert_array_equal(baridx(SQUARE, SQUARE_BARS[:, ::-1]),
                               [[0, 3, 1], [1, 4, 2]])

    def test_custom_order(self):
        bars = SQUARE_BARS[[4, 3, 2, 1, 0], :]
        npt.assert_array_equal(baridx(SQUARE, bars), [[4, 1, 3], [3, 0, 2]])

    def test_missing_edge(self):
        with pytest.raises(ValueError, match="baridx:invalidInputs"):
            baridx(SQUARE, SQUARE_BARS[:4, :])

    def test_empty(self):
        assert baridx(np.empty((0, 3), dtype=int), SQUARE_BARS).shape == (0, 3)
