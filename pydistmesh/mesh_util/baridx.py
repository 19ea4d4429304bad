import numpy as np

from .uniqbar import cycbar


def baridx(tria, bars):
    """
    baridx bar index of every cycle edge in a simplex triangulation.

    Parameters
    ----------
    tria : (M, D+1) int array
        Simplex connectivity.
    bars : (E, 2) int array
        Edge list, rows in either node order.

    Returns
    -------
    tbar : (M, D+1) int array
        TBAR[ii, jj] is the row of BARS matching the edge between
        TRIA[ii, jj] and TRIA[ii, (jj + 1) % (D + 1)].
    """

    tria = np.asarray(tria, dtype=int)
    bars = np.sort(np.asarray(bars, dtype=int).reshape(-1, 2), axis=1)

    if tria.shape[0] == 0:
        return np.empty(tria.shape, dtype=int)

    ee = cycbar(tria)

    #---------------------------------------------- encode edges as 1D keys
    ekey = ee[:, :, 0].astype(np.int64) * (2**31) + ee[:, :, 1]
    bkey = bars[:, 0].astype(np.int64) * (2**31) + bars[:, 1]

    #---------------------------------------------- fast membership
    bdict = {val: idx for idx, val in enumerate(bkey.tolist())}
    tbar = np.array([bdict.get(val, -1) for val in ekey.ravel().tolist()],
                    dtype=int).reshape(ee.shape[:2])

    if np.any(tbar < 0):
        raise ValueError("baridx:invalidInputs - Simplex edge missing from BARS.")

    return tbar
