"""Tests for mesh_util/delaunayn.py and mesh_util/deltri.py."""

import numpy as np
import numpy.testing as npt

from pydistmesh.mesh_cost.simpvol import simpvol
from pydistmesh.mesh_util.delaunayn import delaunayn
from pydistmesh.mesh_util.deltri import deltri


def _lshape(p):
    """L-shaped region [0, 2]^2 without the quadrant x > 1, y > 1."""
    dbox = np.maximum(np.abs(p[:, 0] - 1.0) - 1.0, np.abs(p[:, 1] - 1.0) - 1.0)
    dcut = np.maximum(1.0 - p[:, 0], 1.0 - p[:, 1])
    return np.maximum(dbox, -dcut)


L_VERT = np.array([
    [0.0, 0.0], [1.0, 0.0], [2.0, 0.0],
    [0.0, 1.0], [1.0, 1.0], [2.0, 1.0],
    [0.0, 2.0], [1.0, 2.0],
])


class TestDelaunayn:
    def test_square(self):
        vert = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
        tria = delaunayn(vert)
        assert tria.shape == (2, 3)
        npt.assert_allclose(np.sum(np.abs(simpvol(vert, tria))), 1.0)

    def test_small_coordinates(self):
        vert = 1.0e-9 * np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
        tria = delaunayn(vert)
        assert tria.shape == (2, 3)
        npt.assert_allclose(np.sum(np.abs(simpvol(vert, tria))), 1.0e-18)

    def test_large_coordinates(self):
        vert = 1.0e6 * np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
        assert delaunayn(vert).shape == (2, 3)

    def test_too_few_points(self):
        tria = delaunayn(np.array([[0.0, 0.0], [1.0, 0.0]]))
        assert tria.shape == (0, 3)

    def test_no_points(self):
        assert delaunayn(np.empty((0, 3))).shape == (0, 4)

    def test_collinear_points(self):
        vert = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
        assert delaunayn(vert).shape == (0, 3)

    def test_cube_fills_volume(self):
        vert = np.array([[x, y, z] for z in (0.0, 1.0)
                         for y in (0.0, 1.0) for x in (0.0, 1.0)])
        tria = delaunayn(vert)
        assert tria.shape[1] == 4
        vol = np.abs(simpvol(vert, tria))
        assert np.all(vol > 0.0)
        npt.assert_allclose(np.sum(vol), 1.0)

    def test_integer_output(self):
        vert = np.random.default_rng(0).random((20, 2))
        assert np.issubdtype(delaunayn(vert).dtype, np.integer)


class TestDeltri:
    def test_concave_simplex_removed(self):
        tria = deltri(L_VERT, _lshape, 1.0)
        assert tria.shape == (6, 3)
        npt.assert_allclose(np.sum(np.abs(simpvol(L_VERT, tria))), 3.0)

    def test_centroids_inside(self):
        h0 = 1.0
        tria = deltri(L_VERT, _lshape, h0)
        tmid = np.mean(L_VERT[tria, :], axis=1)
        assert np.all(_lshape(tmid) < -1.0e-3 * h0)

    def test_bridge_triangle_absent(self):
        tria = np.sort(deltri(L_VERT, _lshape, 1.0), axis=1)
        assert not np.any(np.all(tria == [4, 5, 7], axis=1))

    def test_threshold_option(self):
        def fd(p):
            return np.full(p.shape[0], -0.05)

        assert deltri(L_VERT, fd, 1.0).shape[0] == 7
        opts = {"geometry_evaluation_threshold": 0.1}
        assert deltri(L_VERT, fd, 1.0, opts).shape[0] == 0

    def test_degenerate_input(self):
        vert = np.array([[0.0, 0.0], [1.0, 1.0]])
        assert deltri(vert, _lshape, 1.0).shape == (0, 3)
