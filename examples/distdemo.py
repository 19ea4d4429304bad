import numpy as np
import matplotlib.pyplot as plt

from pydistmesh.boundedges import boundedges
from pydistmesh.distmesh import distmesh
from pydistmesh.mesh_cost.simpqual import simpqual
from pydistmesh.mesh_util.uniqbar import uniqbar


def distdemo(demo):
    """
    DISTDEMO : run the DISTMESH examples.

    Parameters
    ----------
    demo : int
        Number of the demo to run.

    Available demos:
    - DEMO-0 : uniform mesh of the unit disk.
    - DEMO-1 : rectangle with its four corners fixed.
    - DEMO-2 : ring with element sizes graded toward the hole.
    - DEMO-3 : L-shaped region, concave corner carved by the centroid test.
    - DEMO-4 : tetrahedral mesh of the unit ball.

    See also : distmesh, boundedges
    """

    plt.close("all")

    if demo == 0:
        demo0()
    elif demo == 1:
        demo1()
    elif demo == 2:
        demo2()
    elif demo == 3:
        demo3()
    elif demo == 4:
        demo4()
    else:
        raise ValueError("distdemo:invalidSelection - Invalid selection!")


def drawmesh(vert, tria, title=""):
    """Draw a 2-D mesh and its boundary edges."""

    bars = uniqbar(tria)
    bnds = np.abs(boundedges(vert, tria, bars))

    plt.figure()
    plt.triplot(vert[:, 0], vert[:, 1], tria[:, 0:3], color=[.2, .2, .2])
    for ibar in bnds:
        plt.plot(vert[bars[ibar, :], 0], vert[bars[ibar, :], 1], color="r")
    plt.gca().set_aspect("equal")
    plt.axis("off")

    qual = simpqual(vert, tria)
    plt.title(f"{title} |TRIA|={tria.shape[0]}, Q(MIN)={qual.min():.3f}")


def demo0():
    """
    DEMO0 : the unit disk with a uniform mesh-size.
    """

    print(
        " The simplest case -- the unit disk, defined by the distance \n"
        " function |P| - 1, meshed with uniform elements. \n"
    )

    def fd(p):
        return np.sqrt(np.sum(p**2, axis=1)) - 1.0

    opts = {"disp": 20}
    vert, tria = distmesh(fd, 0.2, 1.0, [[-1, 1], [-1, 1]], opts=opts,
                          rng=np.random.default_rng(0))

    drawmesh(vert, tria, "DISK:")
    plt.draw()


def demo1():
    """
    DEMO1 : a rectangle, corners held in place as fixed points.
    """

    print(
        " Sharp corners are not recovered by the boundary projection \n"
        " alone. Passing them as fixed points keeps them in the mesh. \n"
    )

    def fd(p):
        return np.maximum(np.abs(p[:, 0]) - 1.0, np.abs(p[:, 1]) - 0.5)

    pfix = np.array([[-1., -.5], [1., -.5], [1., .5], [-1., .5]])

    vert, tria = distmesh(fd, 0.1, None, [[-1, 1], [-.5, .5]], pfix,
                          rng=np.random.default_rng(0))

    drawmesh(vert, tria, "RECT:")
    plt.draw()


def demo2():
    """
    DEMO2 : a ring, small elements near the inner circle.
    """

    print(
        " Element sizes follow the relative mesh-size function FH, \n"
        " here growing linearly away from the inner boundary. \n"
    )

    def fd(p):
        rr = np.sqrt(np.sum(p**2, axis=1))
        return np.maximum(rr - 1.0, 0.4 - rr)

    def fh(p):
        rr = np.sqrt(np.sum(p**2, axis=1))
        return 0.05 + 0.3 * (rr - 0.4)

    vert, tria = distmesh(fd, 0.05, fh, [[-1, 1], [-1, 1]],
                          rng=np.random.default_rng(0))

    drawmesh(vert, tria, "RING:")
    plt.draw()


def demo3():
    """
    DEMO3 : an L-shaped region.
    """

    print(
        " Simplexes bridging the concave corner are removed by their \n"
        " centroid distance, every time the points are retriangulated. \n"
    )

    def fd(p):
        dbox = np.maximum(np.abs(p[:, 0]) - 1.0, np.abs(p[:, 1]) - 1.0)
        dcut = np.maximum(-p[:, 0], -p[:, 1])
        return np.maximum(dbox, -dcut)

    pfix = np.array([[-1., -1.], [1., -1.], [1., 0.], [0., 0.],
                     [0., 1.], [-1., 1.]])

    vert, tria = distmesh(fd, 0.1, None, [[-1, 1], [-1, 1]], pfix,
                          rng=np.random.default_rng(0))

    drawmesh(vert, tria, "L-SHAPE:")
    plt.draw()


def demo4():
    """
    DEMO4 : the unit ball in three dimensions.
    """

    print(
        " The same code path meshes D-dimensional regions; here the \n"
        " unit ball is filled with tetrahedra. \n"
    )

    def fd(p):
        return np.sqrt(np.sum(p**2, axis=1)) - 1.0

    vert, tria = distmesh(fd, 0.2, None, [[-1, 1], [-1, 1], [-1, 1]],
                          opts={"max_steps": 400},
                          rng=np.random.default_rng(0))

    qual = simpqual(vert, tria)
    print(f" |VERT|={vert.shape[0]}, |TRIA|={tria.shape[0]}, "
          f"Q(MIN)={qual.min():.3f}, Q(MEAN)={qual.mean():.3f}\n")

    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    ax.scatter(vert[:, 0], vert[:, 1], vert[:, 2], s=4, color=[.2, .2, .2])
    ax.set_title(f"BALL: |TRIA|={tria.shape[0]}")
    plt.draw()


if __name__ == "__main__":
    for demo in range(5):
        distdemo(demo)
    plt.show()
