import math

import numpy as np


def simpvol(pp, tt):
    """
    SIMPVOL calc. signed volumes for the simplexes of a triangulation
    embedded in D-dimensional space (areas for D = 2).

    Parameters
    ----------
    pp : (N, D) array
        Vertex coordinates.
    tt : (T, D+1) array
        Simplex connectivity (0-based indices).

    Returns
    -------
    vol : (T,) array
        Signed simplex volumes, positive for counter-clockwise (D = 2)
        or right-handed (D = 3) vertex order.
    """
    if not (isinstance(pp, np.ndarray) and isinstance(tt, np.ndarray)):
        raise TypeError("simpvol:incorrectInputClass")

    if pp.ndim != 2 or tt.ndim != 2:
        raise ValueError("simpvol:incorrectDimensions")
    if tt.shape[1] != pp.shape[1] + 1:
        raise ValueError("simpvol:incorrectDimensions")

    if tt.shape[0] == 0:
        return np.empty(0)

    nnod = pp.shape[0]
    if np.min(tt) < 0 or np.max(tt) >= nnod:
        raise ValueError("simpvol:invalidInputs")

    ndim = pp.shape[1]

    if ndim == 2:
        # 2D signed area
        ev12 = pp[tt[:, 1], :] - pp[tt[:, 0], :]
        ev13 = pp[tt[:, 2], :] - pp[tt[:, 0], :]
        return 0.5 * (ev12[:, 0] * ev13[:, 1] - ev12[:, 1] * ev13[:, 0])

    # edge vectors from the first vertex, one simplex per matrix
    evec = pp[tt[:, 1:], :] - pp[tt[:, [0]], :]

    return np.linalg.det(np.swapaxes(evec, 1, 2)) / math.factorial(ndim)
