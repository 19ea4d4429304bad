import numpy as np
from scipy.spatial import Delaunay, QhullError

from ..mesh_cost.simpvol import simpvol


def delaunayn(vert, options=None):
    """
    delaunayn compute the Delaunay triangulation of a D-dimensional
    point set via Qhull.

    Parameters
    ----------
    vert : (N, D) array
        Point coordinates.
    options : str, optional
        Qhull options. Defaults to "Qt Qbb Qc" ("Qt Qbb Qc Qx" for D >= 4).

    Returns
    -------
    tria : (M, D+1) int array
        Simplex connectivity. Empty when the input is too small or too
        degenerate to be triangulated.
    """

    n, d = vert.shape

    if options is None:
        if d >= 4:
            options = "Qt Qbb Qc Qx"
        else:
            options = "Qt Qbb Qc"

    if n < d + 1:
        return np.empty((0, d + 1), dtype=int)

    try:
        tria = Delaunay(vert, qhull_options=options).simplices
    except QhullError:
        # flat or coincident input, no full-dimensional hull
        return np.empty((0, d + 1), dtype=int)

    tria = np.asarray(tria, dtype=int)

    # --- drop the zero-volume simplices "Qt" can leave behind,
    # relative to the longest edge from the first node of each simplex
    evec = vert[tria[:, 1:], :] - vert[tria[:, :1], :]
    lmax = np.max(np.sqrt(np.sum(evec**2, axis=2)), axis=1)
    vtol = np.finfo(float).eps * lmax**d
    keep = np.abs(simpvol(vert, tria)) > vtol

    return tria[keep, :]
