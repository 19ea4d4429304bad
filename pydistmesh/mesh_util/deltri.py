import numpy as np

from ..hfun_util.evalfun import evalfun
from .delaunayn import delaunayn


def deltri(vert, fd, h0, opts=None):
    """
    deltri Delaunay triangulation restricted to the region defined by a
    signed distance function.

    Simplices are kept only when the distance function at their centroid
    is below -GEOMETRY_EVALUATION_THRESHOLD * H0, which carves the
    concavities out of the convex Delaunay hull.

    Parameters
    ----------
    vert : (N, D) array
        Point coordinates.
    fd : callable
        Signed distance function, (N, D) -> (N,).
    h0 : float
        Initial point spacing.
    opts : dict, optional
        Only 'geometry_evaluation_threshold' is read (default 1.0e-3).

    Returns
    -------
    tria : (M, D+1) int array
        Interior simplices.
    """

    if opts is None:
        opts = {}

    tria = delaunayn(vert)
    if tria.shape[0] == 0:
        return tria

    # -------------------------------- compute "inside" status
    tmid = np.mean(vert[tria, :], axis=1)

    geps = opts.get("geometry_evaluation_threshold", 1.0e-3) * h0
    keep = evalfun(fd, tmid, "deltri") < -geps

    return tria[keep, :]
