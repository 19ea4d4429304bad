import numpy as np

from .mesh_util.baridx import baridx
from .mesh_util.uniqbar import uniqbar


def boundedges(vert, tria, bars=None):
    """
    boundedges find the boundary edges of a simplex triangulation.

    An edge is on the boundary when it belongs to exactly one simplex.
    For 2-simplex triangulations in the plane the edges are also
    oriented: an edge whose node order BARS[i, 0] -> BARS[i, 1] runs
    clockwise around its triangle is returned as -i.

    Parameters
    ----------
    vert : (N, D) array
        Point coordinates.
    tria : (M, D+1) int array
        Simplex connectivity.
    bars : (E, 2) int array, optional
        Edge list the result indexes into. Defaults to UNIQBAR(TRIA).

    Returns
    -------
    bnds : (B,) int array
        Indices into BARS of the boundary edges, in order of first
        appearance in TRIA. Sign-encoded orientation in 2-D.

    Notes
    -----
    Edges shared by three or more simplexes (non-manifold input) are
    treated as interior.
    """

    vert = np.asarray(vert, dtype=float)
    tria = np.asarray(tria, dtype=int)

    if vert.ndim != 2 or tria.ndim != 2:
        raise ValueError("boundedges:incorrectDimensions")

    if bars is None:
        bars = uniqbar(tria)
    else:
        bars = np.asarray(bars, dtype=int).reshape(-1, 2)

    if tria.shape[0] == 0:
        return np.empty(0, dtype=int)

    # --- bar index of every simplex edge slot
    tbar = baridx(tria, bars)

    # --- count appearances, keep edges seen once in first-seen order
    ebar, imap, nbar = np.unique(tbar.ravel(), return_index=True, return_counts=True)
    once = nbar == 1
    ifst = imap[once]
    iord = np.argsort(ifst)
    bnds = ebar[once][iord]

    if vert.shape[1] != 2:
        return bnds

    # --- fix orientation in 2-D, via the owning triangle
    tpos = ifst[iord] // tria.shape[1]
    ttri = tria[tpos, :]

    inod = bars[bnds, 0]
    jnod = bars[bnds, 1]

    # node of the triangle not on the edge
    knod = np.where(
        (ttri[:, 0] != inod) & (ttri[:, 0] != jnod), ttri[:, 0],
        np.where((ttri[:, 1] != inod) & (ttri[:, 1] != jnod),
                 ttri[:, 1], ttri[:, 2]))

    ev12 = vert[jnod, :] - vert[inod, :]
    ev23 = vert[knod, :] - vert[jnod, :]
    turn = ev12[:, 0] * ev23[:, 1] - ev12[:, 1] * ev23[:, 0]

    bnds[turn < 0.0] *= -1

    return bnds
