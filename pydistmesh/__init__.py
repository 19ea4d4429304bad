from .boundedges import boundedges
from .distmesh import distmesh, makeopt
from .mesh_cost.simpqual import simpqual
from .mesh_cost.simpvol import simpvol

__all__ = ["distmesh", "makeopt", "boundedges", "simpvol", "simpqual"]
