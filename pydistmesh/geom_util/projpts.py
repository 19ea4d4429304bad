import numpy as np

from ..hfun_util.evalfun import evalfun


def projpts(vert, fd, h0, nfix=0):
    """
    projpts pull points outside the region back toward its boundary.

    For every point with FD(P) > 0 the gradient of FD is estimated by
    forward differences with step sqrt(eps) * H0, and the point takes a
    single Newton step P - FD(P) * GRAD / |GRAD|^2 toward the zero level
    set. Points may remain slightly outside; later calls correct them.

    Parameters
    ----------
    vert : (N, D) array
        Point coordinates.
    fd : callable
        Signed distance function, (N, D) -> (N,).
    h0 : float
        Initial point spacing, scales the difference step.
    nfix : int, optional
        Number of leading fixed rows in VERT, never projected.

    Returns
    -------
    vnew : (N, D) array
        Projected coordinates. VERT is not modified.
    """

    vnew = np.array(vert, dtype=float)
    ndim = vnew.shape[1]

    dist = evalfun(fd, vnew, "projpts")

    out = dist > 0.0
    out[:nfix] = False
    if not np.any(out):
        return vnew

    deps = np.sqrt(np.finfo(float).eps) * h0

    pout = vnew[out, :]
    dout = dist[out]

    # ------------------------------ forward difference gradient
    grad = np.zeros_like(pout)
    for k in range(ndim):
        pdel = pout.copy()
        pdel[:, k] += deps
        grad[:, k] = (evalfun(fd, pdel, "projpts") - dout) / deps

    # ------------------------------ single Newton step
    gsqr = np.sum(grad**2, axis=1)
    step = np.divide(dout, gsqr, out=np.zeros_like(dout), where=gsqr > 0.0)

    vnew[out, :] = pout - step[:, None] * grad

    return vnew
