from little_tsp.cost_matrix.config import CostMatrixConfig
from little_tsp.cost_matrix.cost_vector import CostVector, CostRow, CostColumn
from little_tsp.cost_matrix.cost_matrix import CostMatrix

__all__ = [
    "CostMatrixConfig",
    "CostVector",
    "CostRow",
    "CostColumn",
    "CostMatrix",
]
