from little_tsp.graph.cost_graph import CostSource, CostGraph
from little_tsp.graph.graph_loader import CostProblem, load_cost_graph, load_problem

__all__ = [
    "CostSource",
    "CostGraph",
    "CostProblem",
    "load_cost_graph",
    "load_problem",
]
