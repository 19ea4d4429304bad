import numpy as np


def uniqbar(tria):
    """
    uniqbar unique bars (edges) of a simplex triangulation.

    Every simplex contributes the D+1 edges of its vertex cycle
    (0-1, 1-2, ..., D-0). Edges are stored with the smaller index first
    and returned in lexicographic order.

    Parameters
    ----------
    tria : (M, D+1) int array
        Simplex connectivity.

    Returns
    -------
    bars : (E, 2) int array
        Sorted unique edge list.
    """

    tria = np.asarray(tria, dtype=int)

    if tria.ndim != 2:
        raise ValueError("uniqbar:incorrectDimensions")

    if tria.shape[0] == 0:
        return np.empty((0, 2), dtype=int)

    # ------------------------------ assemble non-unique edge set
    ee = cycbar(tria).reshape(-1, 2)

    # ------------------------------ lexicographic unique rows
    return np.unique(ee, axis=0)


def cycbar(tria):
    """
    cycbar sorted cycle edges of every simplex, as an (M, D+1, 2) array.
    """

    nvrt = tria.shape[1]
    inxt = np.roll(np.arange(nvrt), -1)

    ee = np.stack((tria, tria[:, inxt]), axis=2)

    return np.sort(ee, axis=2)
