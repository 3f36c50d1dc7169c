from little_tsp.errors import NotAvailableError, InfeasibleSubproblemError
from little_tsp.structures import Edge, CostCell, Matrix, CondensedIndexMap
from little_tsp.cost_matrix import CostMatrix, CostMatrixConfig, CostRow, CostColumn
from little_tsp.graph import CostSource, CostGraph, load_cost_graph, load_problem

__all__ = [
    "NotAvailableError",
    "InfeasibleSubproblemError",
    "Edge",
    "CostCell",
    "Matrix",
    "CondensedIndexMap",
    "CostMatrix",
    "CostMatrixConfig",
    "CostRow",
    "CostColumn",
    "CostSource",
    "CostGraph",
    "load_cost_graph",
    "load_problem",
]
