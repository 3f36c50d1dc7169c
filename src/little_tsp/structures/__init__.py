from little_tsp.structures.edge import Edge, as_edge, as_edges
from little_tsp.structures.cost_cell import CostCell
from little_tsp.structures.matrix import Matrix
from little_tsp.structures.index_map import CondensedIndexMap, UNAVAILABLE

__all__ = [
    "Edge",
    "as_edge",
    "as_edges",
    "CostCell",
    "Matrix",
    "CondensedIndexMap",
    "UNAVAILABLE",
]
