import math

import numpy as np

from .simpvol import simpvol


def simpqual(pp, tt):
    """
    simpqual calc. volume-length ratios for the simplexes of a
    D-dimensional triangulation.

    Parameters
    ----------
    pp : (N, D) array
        Vertex coordinates.
    tt : (T, D+1) array
        Simplex connectivity (0-based indices).

    Returns
    -------
    tscr : (T,) array
        Volume-length ratio of each simplex, 1 for the regular simplex
        and 0 for a degenerate one.
    """
    ndim = pp.shape[1]

    # constant, regular simplex of unit edge scores 1
    scal = math.factorial(ndim) * np.sqrt(2.0**ndim) / np.sqrt(ndim + 1.0)

    # --- simplex volumes (calls simpvol for checks and computation)
    vol = np.abs(simpvol(pp, tt))

    # --- squared edge lengths, all vertex pairs
    lrms = np.zeros(tt.shape[0])
    npair = 0
    for ii in range(ndim + 1):
        for jj in range(ii + 1, ndim + 1):
            lrms += np.sum((pp[tt[:, jj], :] - pp[tt[:, ii], :])**2, axis=1)
            npair += 1

    # root-mean-square length, raised to D
    lrms = (lrms / npair) ** (0.5 * ndim)

    # volume-length ratio
    tscr = scal * vol / lrms

    return tscr
