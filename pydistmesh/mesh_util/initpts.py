import numpy as np

from ..hfun_util.evalfun import evalfun


def initpts(fd, fh, h0, bbox, pfix=None, opts=None, rng=None):
    """
    initpts create the initial point distribution for DISTMESH.

    Points are placed on a regular lattice of spacing H0 covering BBOX,
    points not strictly inside the region are rejected, and the rest is
    thinned with probability (HMIN / FH(P)) ** D so that the density
    follows the inverse of the mesh-size function.

    Parameters
    ----------
    fd : callable
        Signed distance function, (N, D) -> (N,).
    fh : callable, float or None
        Relative mesh-size function, (N, D) -> (N,).
    h0 : float
        Lattice spacing.
    bbox : (D, 2) array
        Bounding box, one (min, max) row per axis.
    pfix : (F, D) array, optional
        Fixed points, prepended unconditionally.
    opts : dict, optional
        Only 'general_precision' is read here (default 1.0e-3).
    rng : numpy.random.Generator, optional
        Random source used for the thinning step.

    Returns
    -------
    vert : (F + N, D) array
        Fixed points followed by the accepted lattice points. Can have
        zero free rows if nothing survives the filtering.
    """

    if opts is None:
        opts = {}
    if rng is None:
        rng = np.random.default_rng()

    bbox = np.asarray(bbox, dtype=float)
    ndim = bbox.shape[0]

    if pfix is None:
        pfix = np.empty((0, ndim))
    pfix = np.asarray(pfix, dtype=float).reshape(-1, ndim)

    # ------------------------------ regular lattice, 1st axis fastest
    npts = 1 + np.floor((bbox[:, 1] - bbox[:, 0]) / h0).astype(int)
    axes = [bbox[k, 0] + h0 * np.arange(npts[k]) for k in range(ndim)]
    grid = np.meshgrid(*axes, indexing="ij")
    vert = np.column_stack([g.ravel(order="F") for g in grid])

    # ------------------------------ keep points inside with margin
    geps = opts.get("general_precision", 1.0e-3) * h0
    vert = vert[evalfun(fd, vert, "initpts") < -geps, :]

    # ------------------------------ thin by mesh-size function
    if vert.shape[0] > 0:
        hval = evalfun(fh, vert, "initpts")
        prob = (np.min(hval) / hval) ** ndim
        vert = vert[rng.random(vert.shape[0]) < prob, :]

    return np.vstack((pfix, vert))
