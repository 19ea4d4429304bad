import numpy as np
from scipy.sparse import csr_matrix

from ..hfun_util.evalfun import evalfun


def barfrc(vert, bars, fh, nfix=0, opts=None):
    """
    barfrc move points by one explicit step of the DISTMESH bar forces.

    Each bar behaves like a spring that only pushes: when its length L
    is below the desired length L0, both endpoints are pushed apart by
    DELTA_T * (L0 - L) along the bar. Desired lengths follow the
    mesh-size function at the bar midpoints, rescaled so that the total
    sum(L0 ** D) matches sum(L ** D) and inflated by 1 + 0.4 / 2 ** (D-1).

    Parameters
    ----------
    vert : (N, D) array
        Current point coordinates.
    bars : (E, 2) int array
        Unique edge list.
    fh : callable, float or None
        Relative mesh-size function, (N, D) -> (N,).
    nfix : int, optional
        Number of leading fixed rows in VERT. These never move.
    opts : dict, optional
        Only 'delta_t' is read (default 0.2).

    Returns
    -------
    vnew : (N, D) array
        Updated point coordinates. VERT is not modified.
    """

    if opts is None:
        opts = {}

    vnew = np.array(vert, dtype=float)
    bars = np.asarray(bars, dtype=int).reshape(-1, 2)
    nvrt, ndim = vnew.shape
    nbar = bars.shape[0]

    if nbar == 0:
        return vnew

    # ------------------------------------------ bar vectors
    barvec = vnew[bars[:, 0], :] - vnew[bars[:, 1], :]
    blen = np.sqrt(np.sum(barvec**2, axis=1))

    # ------------------------------------------ desired lengths
    hbar = evalfun(fh, 0.5 * (vnew[bars[:, 0], :] + vnew[bars[:, 1], :]), "barfrc")

    scal = (np.sum(blen**ndim) / np.sum(hbar**ndim)) ** (1.0 / ndim)
    hlen = hbar * (1.0 + 0.4 / 2.0 ** (ndim - 1)) * scal

    # ------------------------------------------ repulsive forces
    # zero-length bars carry no force
    fmag = np.divide(
        np.maximum(hlen - blen, 0.0), blen,
        out=np.zeros(nbar), where=blen > 0.0)
    fvec = fmag[:, None] * barvec

    # sum contributions bar-to-vert
    IMAT = csr_matrix(
        (np.ones(nbar), (bars[:, 0], np.arange(nbar))), shape=(nvrt, nbar)
    )
    JMAT = csr_matrix(
        (np.ones(nbar), (bars[:, 1], np.arange(nbar))), shape=(nvrt, nbar)
    )
    ftot = IMAT.dot(fvec) - JMAT.dot(fvec)

    # fixed points do not move
    ftot[:nfix, :] = 0.0

    vnew += opts.get("delta_t", 0.2) * ftot

    return vnew
