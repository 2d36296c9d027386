"""Pure visualization layout and scale engine for tipcharts.

This package turns already-materialized records into positioned geometry
(scaled points, path commands, pie arcs, tree coordinates, axis ticks). It must
not import Django or perform any I/O.
"""

from .aggregations import group_reduce, mean_of
from .pie import arc_geometry, centroid, pie
from .scales import BandScale, LinearScale, OrdinalScale
from .stack import stack
from .tree import layout_tree

__all__ = [
    "BandScale",
    "LinearScale",
    "OrdinalScale",
    "arc_geometry",
    "centroid",
    "group_reduce",
    "layout_tree",
    "mean_of",
    "pie",
    "stack",
]
