import time

import numpy as np

from .geom_util.projpts import projpts
from .mesh_util.barfrc import barfrc
from .mesh_util.deltri import deltri
from .mesh_util.initpts import initpts
from .mesh_util.uniqbar import uniqbar


def distmesh(fd, h0, fh=None, bbox=None, pfix=None, opts=None, rng=None, vert=None):
    """
    Generate an unstructured simplex mesh for a region defined by a
    signed distance function.

    [VERT, TRIA] = distmesh(FD, H0, FH, BBOX) returns a triangulation
    {VERT, TRIA} of the region FD(P) < 0, with relative element sizes
    given by FH, starting from a lattice of spacing H0 over BBOX.

    Parameters
    ----------
    fd : callable
        Signed distance function, (N, D) -> (N,). Negative inside, zero
        on the boundary, positive outside. Must be defined a little
        beyond BBOX.
    h0 : float
        Initial point spacing.
    fh : callable, float or None, optional
        Relative mesh-size function, (N, D) -> (N,) positive values.
        A scalar or None gives a uniform mesh.
    bbox : (D, 2) array
        Bounding box, one (min, max) row per axis.
    pfix : (F, D) array, optional
        Fixed points. They are the first F rows of VERT and never move.
    opts : dict, optional
        Dictionary containing user-defined parameters:
        - 'max_steps' : int, default = 10000
          Maximum number of relaxation steps.
        - 'retriangulation_threshold' : float, default = 0.1
          Retriangulate when a point moved more than this fraction of H0
          since the last triangulation.
        - 'points_movement_threshold' : float, default = 1.0e-3
          Stop when no point moved more than this fraction of H0 in one
          step.
        - 'geometry_evaluation_threshold' : float, default = 1.0e-3
          Keep simplices whose centroid distance is below minus this
          fraction of H0.
        - 'delta_t' : float, default = 0.2
          Pseudo time step of the force integration.
        - 'general_precision' : float, default = 1.0e-3
          Keep lattice points whose distance is below minus this
          fraction of H0.
        - 'disp' : int or float, default = np.inf
          Display frequency for iteration progress. Set to `np.inf` for
          quiet execution.
        - 'dbug' : bool, default = False
          Print the timer summary at the end.
    rng : numpy.random.Generator, optional
        Random source for the initial point thinning.
    vert : (N, D) array, optional
        Initial free points. Skips the lattice seeding; PFIX is still
        prepended.

    Returns
    -------
    vert : (N, D) array
        Point coordinates, fixed points first.
    tria : (M, D+1) int array
        Simplex connectivity.

    Notes
    -----
    - Reaching 'max_steps' is not an error. The state of the last step
      is returned.
    - See: P.-O. Persson and G. Strang (2004),
      "A Simple Mesh Generator in MATLAB", *SIAM Review* 46(2): 329-345.
    """

    opts = makeopt(opts)

    # ---------------------------------------------- basic checks
    if not callable(fd):
        raise TypeError("distmesh:incorrectInputClass - FD must be callable.")

    if not (fh is None or callable(fh) or np.isscalar(fh)):
        raise TypeError("distmesh:incorrectInputClass - Incorrect FH input.")
    if np.isscalar(fh) and not fh > 0:
        raise ValueError("distmesh:invalidInputs - Constant FH must be positive.")

    if not np.isscalar(h0) or isinstance(h0, bool):
        raise TypeError("distmesh:incorrectInputClass - H0 must be a scalar.")
    if not (np.isfinite(h0) and h0 > 0):
        raise ValueError("distmesh:invalidInputs - H0 must be positive.")

    if bbox is None:
        raise TypeError("distmesh:incorrectInputClass - BBOX is required.")
    bbox = np.asarray(bbox, dtype=float)
    if bbox.ndim != 2 or bbox.shape[1] != 2 or bbox.shape[0] < 1:
        raise ValueError("distmesh:incorrectDimensions - BBOX must be (D, 2).")
    if not np.all(bbox[:, 1] > bbox[:, 0]):
        raise ValueError("distmesh:invalidInputs - BBOX must have positive extent.")

    ndim = bbox.shape[0]

    pfix = _chkpts(pfix, ndim, "PFIX")
    nfix = pfix.shape[0]

    # ---------------------------------------------- output title
    if not np.isinf(opts["disp"]):
        print("\n Relax distmesh...\n")
        print(" -------------------------------------------------------")
        print("      |ITER.|          |MOVE(X)|          |DTRI(X)|     ")
        print(" -------------------------------------------------------")

    tnow = time.time()
    tcpu = {
        "full": 0.0,
        "init": 0.0,
        "dtri": 0.0,
        "forc": 0.0,
        "proj": 0.0,
    }

    # ---------------------------------------------- initial points
    ttic = time.time()
    if vert is None:
        vert = initpts(fd, fh, h0, bbox, pfix, opts, rng)
    else:
        vert = np.vstack((pfix, _chkpts(vert, ndim, "VERT")))
    tcpu["init"] += time.time() - ttic

    tria = np.empty((0, ndim + 1), dtype=int)

    if vert.shape[0] == 0:
        return vert, tria

    # positions at the last triangulation, +inf forces the first one
    vtri = np.full(vert.shape, np.inf)

    rtol = opts["retriangulation_threshold"] * h0
    ptol = opts["points_movement_threshold"] * h0

    # ---------------------------------------------- main relaxation loop
    for step in range(int(opts["max_steps"])):
        # ------------------------------------------ retriangulate
        if _maxmove(vert, vtri) > rtol:
            ttic = time.time()
            tria = deltri(vert, fd, h0, opts)
            bars = uniqbar(tria)
            vtri = vert.copy()
            tcpu["dtri"] += time.time() - ttic

        vold = vert

        # ------------------------------------------ move points
        ttic = time.time()
        vert = barfrc(vert, bars, fh, nfix, opts)
        tcpu["forc"] += time.time() - ttic

        ttic = time.time()
        vert = projpts(vert, fd, h0, nfix)
        tcpu["proj"] += time.time() - ttic

        # ------------------------------------------ dump-out progress
        move = _maxmove(vert, vold)

        if not np.isinf(opts["disp"]) and step % opts["disp"] == 0:
            print(f"{step:11d} {move / h0:18.6e} {tria.shape[0]:18d}")

        # ------------------------------------------ loop convergence!
        if move < ptol:
            break

    tcpu["full"] += time.time() - tnow

    if opts["dbug"]:
        print("\n Mesh relaxation timer...\n")
        print(f" FULL: {tcpu['full']:.6f}")
        print(f" INIT: {tcpu['init']:.6f}")
        print(f" DTRI: {tcpu['dtri']:.6f}")
        print(f" FORC: {tcpu['forc']:.6f}")
        print(f" PROJ: {tcpu['proj']:.6f}\n")

    if not np.isinf(opts["disp"]):
        print("")

    return vert, tria


def _maxmove(vnew, vold):
    """Largest point displacement between two coordinate arrays."""
    return np.max(np.sqrt(np.sum((vnew - vold) ** 2, axis=1)))


def _chkpts(pp, ndim, name):
    if pp is None:
        return np.empty((0, ndim))

    pp = np.asarray(pp, dtype=float)
    if pp.size == 0:
        return np.empty((0, ndim))

    if pp.ndim == 1:
        pp = pp.reshape(1, -1)
    if pp.ndim != 2 or pp.shape[1] != ndim:
        raise ValueError(
            f"distmesh:incorrectDimensions - {name} must have {ndim} columns."
        )
    if not np.all(np.isfinite(pp)):
        raise ValueError(f"distmesh:invalidInputs - {name} must be finite.")

    return pp


def makeopt(opts=None):
    """
    Initialize the options structure for the `distmesh` function.

    Parameters
    ----------
    opts : dict or None
        User-defined options dictionary. If None, a new dictionary is created.

    Returns
    -------
    opts : dict
        Options dictionary completed with default values for missing parameters.
    """

    if opts is None:
        opts = {}

    if not isinstance(opts, dict):
        raise TypeError("distmesh:incorrectInputClass - OPTS must be a dict.")

    opts = dict(opts)

    defaults = {
        "max_steps": 10000,
        "retriangulation_threshold": 0.1,
        "points_movement_threshold": 1.0e-3,
        "geometry_evaluation_threshold": 1.0e-3,
        "delta_t": 0.2,
        "general_precision": 1.0e-3,
        "disp": np.inf,
        "dbug": False,
    }

    for key in opts:
        if key not in defaults:
            raise ValueError(
                f"distmesh:invalidOptions - Option {key} not recognized."
            )

    # --------------------------- numeric options, all must be > 0
    for key, dval in defaults.items():
        if key == "dbug":
            continue
        if key not in opts:
            opts[key] = dval
            continue
        if isinstance(opts[key], bool) or not isinstance(
            opts[key], (int, float, np.integer, np.floating)
        ):
            raise TypeError("distmesh:incorrectInputClass - Incorrect input class.")
        if not opts[key] > 0:
            raise ValueError(
                f"distmesh:invalidOptionValues - Invalid OPT.{key.upper()} selection."
            )

    # --------------------------- MAX_STEPS
    if not float(opts["max_steps"]).is_integer():
        raise ValueError("distmesh:invalidOptionValues - Invalid OPT.MAX_STEPS selection.")

    # --------------------------- DBUG
    if "dbug" not in opts:
        opts["dbug"] = False
    elif not isinstance(opts["dbug"], bool):
        raise TypeError("distmesh:incorrectInputClass - Incorrect input class.")

    return opts
