import numpy as np


def evalfun(func, vert, name="evalfun"):
    """
    Evaluate a distance- or size-function at a batch of points.

    Parameters
    ----------
    func : callable, float or None
        Function mapping an (N, D) array of points to N scalar values.
        A scalar is treated as a constant field and None as the
        constant field 1.0 (uniform mesh-size).
    vert : ndarray of shape (N, D)
        Coordinates of the evaluation points.
    name : str, optional
        Name of the calling routine, used as prefix in error messages.

    Returns
    -------
    fval : ndarray of shape (N,)
        Function values at the points.

    Notes
    -----
    Errors raised inside FUNC are propagated unchanged. Values that are
    not finite are rejected, since the relaxation cannot continue with
    invalid geometry.
    """

    nvrt = vert.shape[0]

    if func is None:
        return np.ones(nvrt)

    if np.isscalar(func):
        return float(func) * np.ones(nvrt)

    if not callable(func):
        raise TypeError(f"{name}:incorrectInputClass - Field must be callable.")

    if nvrt == 0:
        return np.empty(0)

    fval = np.asarray(func(vert), dtype=float)

    if fval.size != nvrt:
        raise ValueError(
            f"{name}:incorrectDimensions - Field returned {fval.size} "
            f"values for {nvrt} points."
        )
    # allow (N, 1) column output
    fval = fval.reshape(nvrt)

    if not np.all(np.isfinite(fval)):
        raise ValueError(f"{name}:invalidFieldValues - Field returned NaN or Inf.")

    return fval
